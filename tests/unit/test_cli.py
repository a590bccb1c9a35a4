"""Tests for the jls-railroad CLI commands."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from jls_railroad.cli import app
from jls_railroad.core.ebnf import EbnfStore
from jls_railroad.render.results import RenderError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch) -> None:
    """Keep a stray jls-railroad.toml in the working directory out of the tests."""
    monkeypatch.chdir(tmp_path)


# =============================================================================
# --version
# =============================================================================


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "jls-railroad version" in result.output
    assert "railroad-diagrams" in result.output


# =============================================================================
# coverage
# =============================================================================


class TestCoverage:
    def test_bundled_grammar_passes(self) -> None:
        result = runner.invoke(app, ["coverage"])
        assert result.exit_code == 0
        assert "Found 253 diagram rules" in result.output
        assert "Found 253 EBNF definitions" in result.output
        assert "PASSED" in result.output

    def test_drift_fails(self) -> None:
        store = EbnfStore({"OnlyInEbnf": "OnlyInEbnf:\n    x"})
        with patch("jls_railroad.grammar.build_ebnf_store", return_value=store):
            result = runner.invoke(app, ["coverage"])
        assert result.exit_code == 1
        assert "Rules with EBNF but NO DIAGRAM factory:" in result.output
        assert "   - OnlyInEbnf" in result.output
        assert "Rules with DIAGRAM but NO EBNF definition:" in result.output
        assert "FAILED" in result.output

    def test_load_failure(self) -> None:
        with patch(
            "jls_railroad.grammar.build_registry", side_effect=ImportError("no rules module")
        ):
            result = runner.invoke(app, ["coverage"])
        assert result.exit_code == 1
        assert "Failed to load diagram factories" in result.output


# =============================================================================
# render
# =============================================================================


class TestRender:
    def test_known_rule(self) -> None:
        result = runner.invoke(app, ["render", "Block"])
        assert result.exit_code == 0
        assert result.output.startswith("<svg")
        assert "BlockStatements" in result.output

    def test_unknown_rule_prints_placeholder(self) -> None:
        result = runner.invoke(app, ["render", "NotARule"])
        assert result.exit_code == 0
        assert "No factory defined for NotARule" in result.output

    def test_standalone(self) -> None:
        result = runner.invoke(app, ["render", "Block", "--standalone"])
        assert result.exit_code == 0
        assert "<style>" in result.output

    def test_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[render]\nnonterminal_href = "#rule-{name}"\n')
        result = runner.invoke(app, ["render", "Block", "--config", str(config)])
        assert result.exit_code == 0
        assert 'xlink:href="#rule-BlockStatements"' in result.output

    def test_bad_config(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.toml"
        config.write_text('[render]\ndiagram_type = "fancy"\n')
        result = runner.invoke(app, ["render", "Block", "--config", str(config)])
        assert result.exit_code == 1
        assert "diagram_type" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        config = tmp_path / "absent.toml"
        result = runner.invoke(app, ["render", "Block", "--config", str(config)])
        assert result.exit_code == 1
        assert "cannot read settings file" in result.output
        assert not isinstance(result.exception, FileNotFoundError)

    def test_render_error_exits_nonzero(self) -> None:
        with patch(
            "jls_railroad.catalog.GrammarCatalog.markup",
            return_value=RenderError(message="layout failed"),
        ):
            result = runner.invoke(app, ["render", "Block"])
        assert result.exit_code == 1
        assert "<!-- Render error: layout failed -->" in result.output


# =============================================================================
# ebnf
# =============================================================================


class TestEbnf:
    def test_known_rule(self) -> None:
        result = runner.invoke(app, ["ebnf", "ClassDeclaration"])
        assert result.exit_code == 0
        assert result.output.startswith("ClassDeclaration:")

    def test_missing_rule(self) -> None:
        result = runner.invoke(app, ["ebnf", "NotARule"])
        assert result.exit_code == 1
        assert "No EBNF definition for NotARule" in result.output


# =============================================================================
# sections
# =============================================================================


class TestSections:
    def test_lists_sections(self) -> None:
        result = runner.invoke(app, ["sections"])
        assert result.exit_code == 0
        assert "Grammar Sections" in result.output
        assert "lexical" in result.output
        assert "expressions" in result.output

    def test_query(self) -> None:
        result = runner.invoke(app, ["sections", "switch"])
        assert result.exit_code == 0
        assert "statements" in result.output
        assert "lexical" not in result.output

    def test_query_without_matches(self) -> None:
        result = runner.invoke(app, ["sections", "zzzz"])
        assert result.exit_code == 0
        assert "No rules match" in result.output


# =============================================================================
# export
# =============================================================================


class TestExport:
    def test_writes_every_rule(self, tmp_path: Path) -> None:
        out = tmp_path / "site"
        result = runner.invoke(app, ["export", str(out)])
        assert result.exit_code == 0
        assert "Exported 253 of 253 rules" in result.output

        assert len(list(out.glob("*.svg"))) == 253
        assert len(list(out.glob("*.ebnf"))) == 253
        assert (out / "Block.svg").read_text().startswith("<svg")
        assert (out / "Block.ebnf").read_text().startswith("Block:")

        index = (out / "index.md").read_text(encoding="utf-8")
        assert "## §3 Lexical Structure" in index
        assert "- [Block](Block.svg) ([EBNF](Block.ebnf))" in index

    def test_failed_rules_reported(self, tmp_path: Path) -> None:
        out = tmp_path / "site"
        with patch(
            "jls_railroad.catalog.GrammarCatalog.markup",
            return_value=RenderError(message="layout failed"),
        ):
            result = runner.invoke(app, ["export", str(out)])
        assert result.exit_code == 1
        assert "Exported 0 of 253 rules" in result.output
        assert (out / "index.md").exists()

    def test_failure_names_section(self, tmp_path: Path) -> None:
        out = tmp_path / "site"
        with patch(
            "jls_railroad.render.adapter.RenderAdapter.render",
            side_effect=RuntimeError("layout failed"),
        ):
            result = runner.invoke(app, ["export", str(out)])
        assert result.exit_code == 1
        svg = (out / "Identifier.svg").read_text(encoding="utf-8")
        assert svg == "<!-- Render error: rule Identifier in section lexical: layout failed -->"
