"""Tests for the presentation catalog."""

from __future__ import annotations

from typing import Any

import pytest

from jls_railroad.catalog import GrammarCatalog, load_catalog
from jls_railroad.core.dsl import NT, T, diagram, seq
from jls_railroad.core.ebnf import EbnfStore
from jls_railroad.core.ir import Diagram
from jls_railroad.core.registry import RuleRegistry
from jls_railroad.core.sections import Section, SectionIndex
from jls_railroad.render.adapter import RenderAdapter
from jls_railroad.render.results import Markup, RenderError


class EchoAdapter(RenderAdapter):
    """Renders a diagram as its EBNF-ish string instead of SVG."""

    def render(self, node: Diagram | None) -> Any:
        return Markup(text=str(node))


def _broken() -> Diagram:
    raise RuntimeError("factory exploded")


@pytest.fixture()
def catalog() -> GrammarCatalog:
    registry = RuleRegistry()
    registry.register("Block", lambda: diagram(seq("{", NT("BlockStatements"), "}")))
    registry.register("EmptyStatement", lambda: diagram(T(";")))
    registry.register("Broken", _broken)
    registry.seal()
    ebnf = EbnfStore({"Block": "Block:\n    { [BlockStatements] }"})
    sections = SectionIndex(
        [
            Section(id="blocks", title="§14 Blocks", rules=("Block", "Broken")),
            Section(id="statements", title="§14 Statements", rules=("EmptyStatement",)),
        ]
    )
    return GrammarCatalog(registry, ebnf, sections, adapter=EchoAdapter())


class TestMarkup:
    def test_known_rule(self, catalog: GrammarCatalog) -> None:
        assert catalog.markup("Block") == Markup(text='"{" BlockStatements "}"')

    def test_unknown_rule_gets_placeholder(self, catalog: GrammarCatalog) -> None:
        assert "No factory defined for Missing" in catalog.markup("Missing").text

    def test_broken_rule_is_contained(self, catalog: GrammarCatalog) -> None:
        result = catalog.markup("Broken")
        assert isinstance(result, RenderError)
        assert result.message == "rule Broken: factory exploded"
        # Siblings still render
        assert catalog.markup("EmptyStatement").ok

    def test_broken_rule_names_section(self, catalog: GrammarCatalog) -> None:
        view = catalog.rule_view("Broken", section="blocks")
        assert view.markup.message == "rule Broken in section blocks: factory exploded"


class TestRuleView:
    def test_pairs_markup_with_ebnf(self, catalog: GrammarCatalog) -> None:
        view = catalog.rule_view("Block")
        assert view.name == "Block"
        assert view.markup.ok
        assert view.ebnf == "Block:\n    { [BlockStatements] }"

    def test_missing_ebnf(self, catalog: GrammarCatalog) -> None:
        assert catalog.rule_view("EmptyStatement").ebnf is None


class TestSectionViews:
    def test_no_query_keeps_all_sections(self, catalog: GrammarCatalog) -> None:
        views = catalog.section_views()
        assert [v.id for v in views] == ["blocks", "statements"]
        assert views[0].rules == ["Block", "Broken"]

    def test_query_drops_empty_sections(self, catalog: GrammarCatalog) -> None:
        views = catalog.section_views("empty")
        assert [v.id for v in views] == ["statements"]
        assert views[0].title == "§14 Statements"

    def test_query_without_matches(self, catalog: GrammarCatalog) -> None:
        assert catalog.section_views("zzz") == []


class TestBundledCatalog:
    def test_renders_bundled_rule(self) -> None:
        view = load_catalog().rule_view("ClassDeclaration")
        assert view.markup.ok
        assert "NormalClassDeclaration" in view.markup.text
        assert view.ebnf is not None
