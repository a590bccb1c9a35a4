"""Tests for the rule registry."""

from __future__ import annotations

import pytest

from jls_railroad.core.dsl import NT, T, diagram, seq
from jls_railroad.core.errors import (
    DuplicateRuleError,
    RegistryError,
    RegistrySealedError,
    RuleFactoryError,
)
from jls_railroad.core.ir import Comment, Diagram
from jls_railroad.core.registry import RuleRegistry, placeholder_diagram


@pytest.fixture()
def registry() -> RuleRegistry:
    reg = RuleRegistry()
    reg.register("Block", lambda: diagram(seq("{", NT("BlockStatements"), "}")))
    reg.register("EmptyStatement", lambda: diagram(T(";")))
    return reg


class TestRegistration:
    def test_names_in_registration_order(self, registry: RuleRegistry) -> None:
        assert registry.names() == ["Block", "EmptyStatement"]
        assert len(registry) == 2
        assert "Block" in registry
        assert list(registry) == ["Block", "EmptyStatement"]

    def test_duplicate_rejected(self, registry: RuleRegistry) -> None:
        with pytest.raises(DuplicateRuleError, match="rule Block"):
            registry.register("Block", lambda: diagram(T("x")))

    def test_names_are_case_sensitive(self, registry: RuleRegistry) -> None:
        registry.register("block", lambda: diagram(T("x")))
        assert "block" in registry
        assert "BLOCK" not in registry

    def test_decorator(self) -> None:
        reg = RuleRegistry()

        @reg.rule("Literal")
        def literal() -> Diagram:
            return diagram(NT("IntegerLiteral"))

        assert reg.lookup("Literal") == literal()

    def test_forward_references_need_no_order(self) -> None:
        reg = RuleRegistry()
        reg.register("A", lambda: diagram(NT("B")))
        reg.register("B", lambda: diagram(NT("A")))
        assert reg.lookup("A") == diagram(NT("B"))


class TestSealing:
    def test_seal_returns_registry(self, registry: RuleRegistry) -> None:
        assert registry.seal() is registry
        assert registry.sealed

    def test_register_after_seal(self, registry: RuleRegistry) -> None:
        registry.seal()
        with pytest.raises(RegistrySealedError):
            registry.register("New", lambda: diagram(T("x")))
        assert "New" not in registry

    def test_sealed_error_is_registry_error(self) -> None:
        assert issubclass(RegistrySealedError, RegistryError)

    def test_lookup_after_seal(self, registry: RuleRegistry) -> None:
        registry.seal()
        assert registry.lookup("EmptyStatement") == diagram(T(";"))


class TestLookup:
    def test_unknown_returns_none(self, registry: RuleRegistry) -> None:
        assert registry.lookup("Nope") is None

    def test_factories_called_on_every_lookup(self) -> None:
        calls = []

        def factory() -> Diagram:
            calls.append(1)
            return diagram(T("x"))

        reg = RuleRegistry()
        reg.register("X", factory)
        first = reg.lookup("X")
        second = reg.lookup("X")
        assert len(calls) == 2
        assert first == second
        assert first is not second

    def test_factory_returning_wrong_type(self) -> None:
        reg = RuleRegistry()
        reg.register("Bad", lambda: T("x"))
        with pytest.raises(RuleFactoryError, match="expected Diagram"):
            reg.lookup("Bad")

    def test_factory_exception_propagates(self) -> None:
        def broken() -> Diagram:
            raise ValueError("broken factory")

        reg = RuleRegistry()
        reg.register("Broken", broken)
        with pytest.raises(ValueError, match="broken factory"):
            reg.lookup("Broken")


class TestPlaceholder:
    def test_diagram_for_unknown_name(self, registry: RuleRegistry) -> None:
        result = registry.diagram_for("Missing")
        assert result == placeholder_diagram("Missing")
        assert isinstance(result.root, Comment)
        assert result.root.text == "No factory defined for Missing"

    def test_diagram_for_known_name(self, registry: RuleRegistry) -> None:
        assert registry.diagram_for("EmptyStatement") == diagram(T(";"))
