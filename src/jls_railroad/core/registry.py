"""
Rule registry: maps rule names to diagram factories.

Factories are zero-argument callables returning a fresh Diagram. They are
called on every lookup and never cached. Rules refer to each other only
through NonTerminal labels, so registration order does not matter and
mutually recursive rules need no ordering pass.

The registry has two phases. While open, rules are registered; seal()
ends initialization and any later register() call is an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from .dsl import comment, diagram
from .errors import (
    DuplicateRuleError,
    RegistrySealedError,
    RuleFactoryError,
    make_rule_error,
)
from .ir.nodes import Diagram

logger = logging.getLogger(__name__)

RuleFactory = Callable[[], Diagram]

PLACEHOLDER_TEMPLATE = "No factory defined for {name}"


class RuleRegistry:
    """
    Registry of rule diagram factories.

    Supports:
    - Registration via register() or the rule() decorator
    - Lookup by name (a miss returns None)
    - Placeholder diagrams for unknown names via diagram_for()
    """

    def __init__(self) -> None:
        self._factories: dict[str, RuleFactory] = {}
        self._sealed = False

    def register(self, name: str, factory: RuleFactory) -> None:
        """
        Register a diagram factory.

        Args:
            name: Rule name (case-sensitive)
            factory: Zero-argument callable returning a Diagram

        Raises:
            RegistrySealedError: If the registry was already sealed
            DuplicateRuleError: If the name is already registered
        """
        if self._sealed:
            raise make_rule_error(
                RegistrySealedError, "registry is sealed; cannot register", name
            )
        if name in self._factories:
            raise make_rule_error(DuplicateRuleError, "rule is already registered", name)

        self._factories[name] = factory
        logger.debug(f"Registered rule: {name}")

    def rule(self, name: str) -> Callable[[RuleFactory], RuleFactory]:
        """Decorator form of register()."""

        def decorator(factory: RuleFactory) -> RuleFactory:
            self.register(name, factory)
            return factory

        return decorator

    def seal(self) -> RuleRegistry:
        """End the initialization phase. Returns self for chaining."""
        self._sealed = True
        logger.debug(f"Sealed rule registry with {len(self._factories)} rules")
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def lookup(self, name: str) -> Diagram | None:
        """
        Build a fresh diagram for a rule.

        Returns:
            The Diagram, or None when no factory is registered

        Raises:
            RuleFactoryError: If the factory returns something other than a Diagram
        """
        factory = self._factories.get(name)
        if factory is None:
            return None

        result = factory()
        if not isinstance(result, Diagram):
            raise make_rule_error(
                RuleFactoryError,
                f"factory returned {type(result).__name__}, expected Diagram",
                name,
            )
        return result

    def diagram_for(self, name: str) -> Diagram:
        """
        Build the diagram for a rule, or a placeholder if it is unknown.

        The placeholder carries a Comment naming the missing rule so one
        unknown name never breaks rendering of its siblings.
        """
        result = self.lookup(name)
        if result is None:
            logger.debug(f"No factory for {name}; using placeholder diagram")
            return placeholder_diagram(name)
        return result

    def names(self) -> list[str]:
        """Registered rule names in registration order."""
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


def placeholder_diagram(name: str) -> Diagram:
    """Diagram shown in place of a rule that has no factory."""
    return diagram(comment(PLACEHOLDER_TEMPLATE.format(name=name)))
