"""Tests for the bundled Java SE 25 grammar content."""

from __future__ import annotations

import pytest

from jls_railroad.core.dsl import NT, choice, diagram, precedence_chain
from jls_railroad.core.ir import Diagram
from jls_railroad.grammar import (
    EBNF_DEFINITIONS,
    build_ebnf_store,
    build_registry,
    build_section_index,
)
from jls_railroad.render.adapter import RenderAdapter

REGISTRY = build_registry()
RULE_NAMES = REGISTRY.names()


class TestStores:
    def test_registry_is_sealed(self) -> None:
        assert REGISTRY.sealed

    def test_rule_count(self) -> None:
        assert len(RULE_NAMES) == 253
        assert len(EBNF_DEFINITIONS) == 253

    def test_every_store_call_is_fresh(self) -> None:
        assert build_registry() is not build_registry()

    def test_ebnf_text_for_known_rule(self) -> None:
        text = build_ebnf_store().get("ClassDeclaration")
        assert text is not None
        assert text.startswith("ClassDeclaration:")

    def test_sections_reference_known_rules(self) -> None:
        index = build_section_index()
        assert set(index.all_rules()) == set(RULE_NAMES)
        assert index.order[0] == "lexical"
        assert index.order[-1] == "expressions"


class TestLeftRecursionElimination:
    @pytest.mark.parametrize(
        ("rule", "operand", "operators"),
        [
            ("ConditionalOrExpression", "ConditionalAndExpression", ["||"]),
            ("ConditionalAndExpression", "InclusiveOrExpression", ["&&"]),
            ("EqualityExpression", "RelationalExpression", ["==", "!="]),
            ("ShiftExpression", "AdditiveExpression", ["<<", ">>", ">>>"]),
            ("AdditiveExpression", "MultiplicativeExpression", ["+", "-"]),
            ("MultiplicativeExpression", "UnaryExpression", ["*", "/", "%"]),
        ],
    )
    def test_binary_operator_rules_are_loops(
        self, rule: str, operand: str, operators: list[str]
    ) -> None:
        assert REGISTRY.lookup(rule) == diagram(precedence_chain(operand, operators))

    def test_relational_keeps_instanceof_alternative(self) -> None:
        expected = diagram(
            choice(
                0,
                precedence_chain("ShiftExpression", ["<", ">", "<=", ">="]),
                NT("InstanceofExpression"),
            )
        )
        assert REGISTRY.lookup("RelationalExpression") == expected


@pytest.fixture(scope="module")
def adapter() -> RenderAdapter:
    return RenderAdapter()


@pytest.mark.parametrize("name", RULE_NAMES)
def test_every_rule_renders(adapter: RenderAdapter, name: str) -> None:
    first = REGISTRY.lookup(name)
    second = REGISTRY.lookup(name)

    assert isinstance(first, Diagram)
    assert first == second
    assert first is not second

    rendered = adapter.render(first)
    assert rendered.ok, rendered.text
    assert rendered.text.startswith("<svg")
    assert adapter.render(second).text == rendered.text


def test_unknown_rule_renders_placeholder(adapter: RenderAdapter) -> None:
    rendered = adapter.render(REGISTRY.diagram_for("NotAJavaRule"))
    assert rendered.ok
    assert "NotAJavaRule" in rendered.text
