"""Tests for the error hierarchy."""

from pathlib import Path

from jls_railroad.core.errors import (
    CapabilityError,
    DuplicateRuleError,
    ErrorContext,
    RailroadError,
    RegistryError,
    SettingsError,
    UnknownSectionError,
    make_rule_error,
)


def test_hierarchy() -> None:
    for error_type in (RegistryError, CapabilityError, UnknownSectionError, SettingsError):
        assert issubclass(error_type, RailroadError)
    assert issubclass(DuplicateRuleError, RegistryError)


def test_message_without_context() -> None:
    error = CapabilityError("no Skip constructor")
    assert str(error) == "no Skip constructor"
    assert error.context is None


def test_context_prefix() -> None:
    error = make_rule_error(DuplicateRuleError, "rule is already registered", "Block", "statements")
    assert isinstance(error, DuplicateRuleError)
    assert str(error) == "rule Block in section statements: rule is already registered"
    assert error.message == "rule is already registered"


def test_file_context() -> None:
    context = ErrorContext(file=Path("jls-railroad.toml"))
    assert context.format() == "jls-railroad.toml"
