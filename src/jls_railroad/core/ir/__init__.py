"""
Diagram node types.

All node types are re-exported from this package.
"""

from .nodes import (
    Choice,
    Comment,
    Diagram,
    DiagramItem,
    NodeKind,
    NonTerminal,
    OneOrMore,
    Optional,
    Sequence,
    Stack,
    Terminal,
    ZeroOrMore,
)

__all__ = [
    "Choice",
    "Comment",
    "Diagram",
    "DiagramItem",
    "NodeKind",
    "NonTerminal",
    "OneOrMore",
    "Optional",
    "Sequence",
    "Stack",
    "Terminal",
    "ZeroOrMore",
]
