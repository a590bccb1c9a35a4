"""
Error types for grammar registration, rendering, and configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class RailroadError(Exception):
    """Base exception for all jls-railroad errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class RegistryError(RailroadError):
    """
    Raised when the rule registry is used incorrectly.

    Examples:
    - Registering the same rule name twice
    - Registering after the registry was sealed
    - A factory that does not produce a Diagram
    """

    pass


class DuplicateRuleError(RegistryError):
    """Raised when a rule name is registered more than once."""

    pass


class RegistrySealedError(RegistryError):
    """Raised when register() is called on a sealed registry."""

    pass


class RuleFactoryError(RegistryError):
    """Raised when a rule factory returns something other than a Diagram."""

    pass


class CapabilityError(RailroadError):
    """
    Raised when the diagram-drawing capability cannot build a node.

    Examples:
    - The capability does not expose a constructor for a node kind
    - A constructor asked to be instantiated but is not a class
    """

    pass


class UnknownSectionError(RailroadError):
    """Raised when a section id is not part of the section index."""

    pass


class SettingsError(RailroadError):
    """Raised when a settings file is malformed or holds invalid values."""

    pass


@dataclass
class ErrorContext:
    """
    Context for an error: the rule being processed and, for settings
    errors, the file that was read.

    Attributes:
        rule: Rule name the error relates to
        section: Optional section id the rule was rendered from
        file: Optional path of a configuration file
    """

    rule: str | None = None
    section: str | None = None
    file: Path | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable prefix.

        Returns:
            Formatted string like: "rule ClassDeclaration in section classes"
        """
        parts: list[str] = []
        if self.file:
            parts.append(str(self.file))
        if self.rule:
            parts.append(f"rule {self.rule}")
        if self.section:
            parts.append(f"in section {self.section}")
        return " ".join(parts)


def make_rule_error(
    error_type: type[RailroadError],
    message: str,
    rule: str,
    section: str | None = None,
) -> RailroadError:
    """
    Helper to create an error carrying the offending rule name.

    Args:
        error_type: Concrete RailroadError subclass to instantiate
        message: Error description
        rule: Rule name
        section: Optional section id

    Returns:
        Error instance with context attached
    """
    return error_type(message, ErrorContext(rule=rule, section=section))
