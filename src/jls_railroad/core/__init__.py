"""Core functionality: diagram IR and DSL, rule registry, EBNF store, sections, coverage."""

from . import ir
from .coverage import CoverageReport, check_coverage
from .ebnf import EbnfStore
from .errors import (
    CapabilityError,
    DuplicateRuleError,
    ErrorContext,
    RailroadError,
    RegistryError,
    RegistrySealedError,
    RuleFactoryError,
    SettingsError,
    UnknownSectionError,
)
from .registry import RuleRegistry, placeholder_diagram
from .sections import Section, SectionIndex, filter_names
from .settings import RenderSettings, load_settings

__all__ = [
    "ir",
    "CapabilityError",
    "CoverageReport",
    "DuplicateRuleError",
    "EbnfStore",
    "ErrorContext",
    "RailroadError",
    "RegistryError",
    "RegistrySealedError",
    "RenderSettings",
    "RuleFactoryError",
    "RuleRegistry",
    "Section",
    "SectionIndex",
    "SettingsError",
    "UnknownSectionError",
    "check_coverage",
    "filter_names",
    "load_settings",
    "placeholder_diagram",
]
