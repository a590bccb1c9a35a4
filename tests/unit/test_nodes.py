"""Tests for the diagram node model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jls_railroad.core.ir import (
    Choice,
    Comment,
    Diagram,
    NodeKind,
    NonTerminal,
    OneOrMore,
    Optional,
    Sequence,
    Stack,
    Terminal,
    ZeroOrMore,
)


class TestLeaves:
    def test_terminal_text(self) -> None:
        node = Terminal(text="class")
        assert node.kind == NodeKind.TERMINAL
        assert node.text == "class"

    @pytest.mark.parametrize("cls", [Terminal, NonTerminal, Comment])
    def test_empty_text_rejected(self, cls) -> None:
        with pytest.raises(ValidationError):
            cls(text="")

    def test_nodes_are_frozen(self) -> None:
        node = NonTerminal(text="Expression")
        with pytest.raises(ValidationError):
            node.text = "Statement"

    def test_equality_is_structural(self) -> None:
        assert Terminal(text="if") == Terminal(text="if")
        assert Terminal(text="if") != NonTerminal(text="if")


class TestContainers:
    def test_empty_sequence_allowed(self) -> None:
        assert Sequence().items == ()
        assert Stack().items == ()

    def test_sequence_keeps_order(self) -> None:
        node = Sequence(items=(Terminal(text="a"), NonTerminal(text="B")))
        assert [i.text for i in node.items] == ["a", "B"]

    def test_choice_requires_items(self) -> None:
        with pytest.raises(ValidationError):
            Choice(default_index=0, items=())

    def test_choice_default_index_in_range(self) -> None:
        node = Choice(default_index=1, items=(Terminal(text="a"), Terminal(text="b")))
        assert node.default_index == 1

    def test_choice_default_index_out_of_range(self) -> None:
        with pytest.raises(ValidationError, match="out of range"):
            Choice(default_index=2, items=(Terminal(text="a"), Terminal(text="b")))

    def test_choice_negative_default_index(self) -> None:
        with pytest.raises(ValidationError):
            Choice(default_index=-1, items=(Terminal(text="a"),))


class TestRepetition:
    @pytest.mark.parametrize("cls", [Optional, OneOrMore, ZeroOrMore])
    def test_wraps_single_item(self, cls) -> None:
        node = cls(item=NonTerminal(text="Dims"))
        assert node.item == NonTerminal(text="Dims")


class TestDiagram:
    def test_diagram_wraps_root(self) -> None:
        d = Diagram(root=Sequence(items=(Terminal(text=";"),)))
        assert d.kind == NodeKind.DIAGRAM
        assert isinstance(d.root, Sequence)

    def test_nested_diagram_rejected(self) -> None:
        inner = Diagram(root=Terminal(text="x"))
        with pytest.raises(ValidationError):
            Diagram(root=inner)

    def test_diagram_inside_sequence_rejected(self) -> None:
        inner = Diagram(root=Terminal(text="x"))
        with pytest.raises(ValidationError):
            Sequence(items=(inner,))

    def test_round_trips_through_dict(self) -> None:
        d = Diagram(
            root=Sequence(
                items=(
                    NonTerminal(text="A"),
                    ZeroOrMore(item=Choice(default_index=0, items=(Terminal(text="+"),))),
                )
            )
        )
        assert Diagram.model_validate(d.model_dump()) == d


class TestStr:
    def test_ebnf_like_rendering(self) -> None:
        node = Sequence(
            items=(
                NonTerminal(text="Type"),
                Optional(item=Terminal(text="...")),
                ZeroOrMore(item=NonTerminal(text="Dims")),
                Choice(default_index=0, items=(Terminal(text="a"), Terminal(text="b"))),
            )
        )
        assert str(node) == 'Type [ "..." ] { Dims } ( "a" | "b" )'
