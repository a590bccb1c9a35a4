"""Tests for the diagram constructor functions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jls_railroad.core.dsl import (
    NT,
    T,
    choice,
    diagram,
    one_or_more,
    optional,
    precedence_chain,
    separated,
    seq,
    stack,
    zero_or_more,
)
from jls_railroad.core.ir import (
    Choice,
    Diagram,
    NonTerminal,
    OneOrMore,
    Optional,
    Sequence,
    Stack,
    Terminal,
    ZeroOrMore,
)


class TestConstructors:
    def test_strings_become_terminals(self) -> None:
        node = seq("(", NT("Expression"), ")")
        assert node.items == (
            Terminal(text="("),
            NonTerminal(text="Expression"),
            Terminal(text=")"),
        )

    def test_wrappers(self) -> None:
        assert optional("x") == Optional(item=Terminal(text="x"))
        assert one_or_more(NT("Dim")) == OneOrMore(item=NonTerminal(text="Dim"))
        assert zero_or_more("y") == ZeroOrMore(item=Terminal(text="y"))

    def test_stack(self) -> None:
        node = stack(T("a"), T("b"))
        assert isinstance(node, Stack)
        assert len(node.items) == 2

    def test_choice_keeps_default(self) -> None:
        node = choice(1, "public", "private")
        assert isinstance(node, Choice)
        assert node.default_index == 1

    def test_choice_without_items_fails(self) -> None:
        with pytest.raises(ValidationError):
            choice(0)

    def test_diagram_accepts_string_root(self) -> None:
        assert diagram(";") == Diagram(root=Terminal(text=";"))

    def test_calls_are_pure(self) -> None:
        first = seq(NT("A"), optional(T("b")))
        second = seq(NT("A"), optional(T("b")))
        assert first == second
        assert first is not second


class TestPrecedenceChain:
    def test_matches_hand_written_form(self) -> None:
        expected = Sequence(
            items=(
                NonTerminal(text="MultiplicativeExpression"),
                ZeroOrMore(
                    item=Sequence(
                        items=(
                            Choice(
                                default_index=0,
                                items=(Terminal(text="+"), Terminal(text="-")),
                            ),
                            NonTerminal(text="MultiplicativeExpression"),
                        )
                    )
                ),
            )
        )
        assert precedence_chain("MultiplicativeExpression", ["+", "-"]) == expected

    def test_single_operator(self) -> None:
        node = precedence_chain("AndExpression", ["&"])
        loop = node.items[1]
        assert isinstance(loop, ZeroOrMore)
        ops = loop.item.items[0]
        assert ops.items == (Terminal(text="&"),)

    def test_requires_an_operator(self) -> None:
        with pytest.raises(ValidationError):
            precedence_chain("X", [])


class TestSeparated:
    def test_default_comma(self) -> None:
        assert separated("TypeParameter") == seq(
            NT("TypeParameter"), zero_or_more(seq(T(","), NT("TypeParameter")))
        )

    def test_custom_separator(self) -> None:
        node = separated("ClassType", "&")
        assert node.items[1].item.items[0] == Terminal(text="&")
