"""Tests for the section index and name filter."""

from __future__ import annotations

import pytest

from jls_railroad.core.errors import UnknownSectionError
from jls_railroad.core.sections import Section, SectionIndex, filter_names

NAMES = ["ClassDeclaration", "ClassBody", "EnumDeclaration", "Block"]


@pytest.fixture()
def index() -> SectionIndex:
    return SectionIndex(
        [
            Section(id="classes", title="§8 Classes", rules=("ClassDeclaration", "ClassBody")),
            Section(id="blocks", title="§14 Blocks", rules=("Block", "ClassDeclaration")),
            Section(id="empty", title="Nothing", rules=()),
        ]
    )


class TestFilterNames:
    def test_empty_query_keeps_all(self) -> None:
        assert filter_names(NAMES, "") == NAMES

    def test_whitespace_query_keeps_all(self) -> None:
        assert filter_names(NAMES, "   ") == NAMES

    def test_case_insensitive_substring(self) -> None:
        assert filter_names(NAMES, "class") == ["ClassDeclaration", "ClassBody"]
        assert filter_names(NAMES, "DECLARATION") == ["ClassDeclaration", "EnumDeclaration"]

    def test_query_is_trimmed(self) -> None:
        assert filter_names(NAMES, "  block ") == ["Block"]

    def test_no_match(self) -> None:
        assert filter_names(NAMES, "zzz") == []

    def test_order_preserved(self) -> None:
        assert filter_names(["b1", "a1", "c1"], "1") == ["b1", "a1", "c1"]


class TestSectionIndex:
    def test_order(self, index: SectionIndex) -> None:
        assert index.order == ["classes", "blocks", "empty"]
        assert len(index) == 3

    def test_title_and_rules(self, index: SectionIndex) -> None:
        assert index.title("blocks") == "§14 Blocks"
        assert index.rules("classes") == ["ClassDeclaration", "ClassBody"]

    def test_unknown_section(self, index: SectionIndex) -> None:
        with pytest.raises(UnknownSectionError, match="nope"):
            index.get("nope")

    def test_filtered_keeps_every_section(self, index: SectionIndex) -> None:
        result = index.filtered("block")
        assert list(result) == ["classes", "blocks", "empty"]
        assert result["blocks"] == ["Block"]
        assert result["classes"] == []

    def test_rule_in_several_sections(self, index: SectionIndex) -> None:
        result = index.filtered("ClassDecl")
        assert result["classes"] == ["ClassDeclaration"]
        assert result["blocks"] == ["ClassDeclaration"]

    def test_all_rules_first_occurrence(self, index: SectionIndex) -> None:
        assert index.all_rules() == ["ClassDeclaration", "ClassBody", "Block"]
