"""
Constructor functions for writing grammar rules as diagram trees.

Each function is pure and returns a new immutable node. Bare strings are
accepted wherever a child node is expected and become Terminals, the same
convention the railroad-diagrams library uses.

    diagram(seq(T("extends"), NT("ClassType")))

Two derived helpers cover shapes the JLS grammar repeats:

- precedence_chain: left-recursion elimination for binary operators,
  ``E -> E op E`` drawn as ``E (op E)*``
- separated: ``X {, X}`` lists
"""

from __future__ import annotations

from collections.abc import Iterable

from .ir.nodes import (
    Choice,
    Comment,
    Diagram,
    DiagramItem,
    NonTerminal,
    OneOrMore,
    Optional,
    Sequence,
    Stack,
    Terminal,
    ZeroOrMore,
)

Child = DiagramItem | str


def _coerce(item: Child) -> DiagramItem:
    if isinstance(item, str):
        return Terminal(text=item)
    return item


def terminal(text: str) -> Terminal:
    return Terminal(text=text)


def nonterminal(text: str) -> NonTerminal:
    return NonTerminal(text=text)


def comment(text: str) -> Comment:
    return Comment(text=text)


def seq(*items: Child) -> Sequence:
    return Sequence(items=tuple(_coerce(i) for i in items))


def stack(*items: Child) -> Stack:
    return Stack(items=tuple(_coerce(i) for i in items))


def choice(default_index: int, *items: Child) -> Choice:
    """
    Ordered alternation.

    The default index is required: callers state which alternative is the
    straight-through path. Raises pydantic.ValidationError when there are
    no alternatives or the index is out of range.
    """
    return Choice(default_index=default_index, items=tuple(_coerce(i) for i in items))


def optional(item: Child) -> Optional:
    return Optional(item=_coerce(item))


def one_or_more(item: Child) -> OneOrMore:
    return OneOrMore(item=_coerce(item))


def zero_or_more(item: Child) -> ZeroOrMore:
    return ZeroOrMore(item=_coerce(item))


def diagram(root: Child) -> Diagram:
    return Diagram(root=_coerce(root))


# Short aliases used throughout the grammar definitions
T = terminal
NT = nonterminal


def precedence_chain(base: str, operators: Iterable[str]) -> Sequence:
    """
    Build the loop form of a left-recursive binary-operator rule.

    ``R: R op1 R | R op2 R | R`` becomes::

        Sequence(NT(R), ZeroOrMore(Sequence(Choice(0, T(op1), T(op2)), NT(R))))

    Args:
        base: Name of the operand rule
        operators: Operator tokens, in display order

    Returns:
        The chain as a Sequence (wrap with diagram() to register it)
    """
    ops = [terminal(op) for op in operators]
    return seq(
        nonterminal(base),
        zero_or_more(seq(choice(0, *ops), nonterminal(base))),
    )


def separated(name: str, separator: str = ",") -> Sequence:
    """``name {separator name}``"""
    return seq(nonterminal(name), zero_or_more(seq(terminal(separator), nonterminal(name))))
