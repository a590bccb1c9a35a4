"""
Java SE 25 grammar content (JLS Chapter 19).

The three stores are built on request, not held at module level:

    registry = build_registry()      # sealed RuleRegistry
    ebnf = build_ebnf_store()        # EbnfStore
    sections = build_section_index() # SectionIndex

Many rules are drawn in a diagram-friendly equivalent form; left-recursive
binary-operator rules are drawn as loops (see core.dsl.precedence_chain).
"""

from jls_railroad.core.ebnf import EbnfStore
from jls_railroad.core.registry import RuleRegistry
from jls_railroad.core.sections import SectionIndex

from .ebnf_definitions import EBNF_DEFINITIONS
from .rules import register_all
from .sections import JAVA25_SECTIONS


def build_registry() -> RuleRegistry:
    """Register every rule factory and seal the registry."""
    registry = RuleRegistry()
    register_all(registry)
    return registry.seal()


def build_ebnf_store() -> EbnfStore:
    return EbnfStore(EBNF_DEFINITIONS)


def build_section_index() -> SectionIndex:
    return SectionIndex(JAVA25_SECTIONS)


__all__ = [
    "EBNF_DEFINITIONS",
    "JAVA25_SECTIONS",
    "build_ebnf_store",
    "build_registry",
    "build_section_index",
]
