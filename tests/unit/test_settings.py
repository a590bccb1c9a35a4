"""Tests for render settings loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from jls_railroad.core.errors import SettingsError
from jls_railroad.core.settings import (
    DEFAULT_SETTINGS_FILE,
    LOG_LEVEL_ENV,
    RenderSettings,
    load_settings,
    log_level_from_env,
)


def write_settings(tmp_path: Path, body: str) -> Path:
    path = tmp_path / DEFAULT_SETTINGS_FILE
    path.write_text(body)
    return path


class TestLoadSettings:
    def test_defaults_when_file_absent(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_settings() == RenderSettings()

    def test_reads_render_table(self, tmp_path: Path) -> None:
        path = write_settings(
            tmp_path,
            """
[render]
diagram_type = "complex"
standalone = true
nonterminal_href = "#rule-{name}"
empty_markup = ""
""",
        )
        settings = load_settings(path)
        assert settings.diagram_type == "complex"
        assert settings.standalone is True
        assert settings.href_for("Block") == "#rule-Block"
        assert settings.empty_markup == ""

    def test_default_file_in_cwd(self, tmp_path: Path, monkeypatch) -> None:
        write_settings(tmp_path, '[render]\ndiagram_type = "complex"\n')
        monkeypatch.chdir(tmp_path)
        assert load_settings().diagram_type == "complex"

    def test_missing_table_uses_defaults(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, "[other]\nkey = 1\n")
        assert load_settings(path) == RenderSettings()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, "[render\n")
        with pytest.raises(SettingsError, match="invalid TOML"):
            load_settings(path)

    def test_invalid_diagram_type(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, '[render]\ndiagram_type = "fancy"\n')
        with pytest.raises(SettingsError, match="diagram_type"):
            load_settings(path)

    def test_standalone_must_be_bool(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, '[render]\nstandalone = "yes"\n')
        with pytest.raises(SettingsError, match="standalone"):
            load_settings(path)

    def test_href_needs_placeholder(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, '[render]\nnonterminal_href = "#rule"\n')
        with pytest.raises(SettingsError, match="placeholder"):
            load_settings(path)

    def test_render_must_be_table(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, "render = 5\n")
        with pytest.raises(SettingsError, match="must be a table"):
            load_settings(path)

    def test_href_must_be_string(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, "[render]\nnonterminal_href = 5\n")
        with pytest.raises(SettingsError, match="nonterminal_href must be a string"):
            load_settings(path)

    @pytest.mark.parametrize(
        "href",
        ["#{name}-{other}", "#{name}-{0}", "#{name}-{", "#{name.missing}"],
    )
    def test_href_must_format_with_name_only(self, tmp_path: Path, href: str) -> None:
        path = write_settings(tmp_path, f"[render]\nnonterminal_href = '{href}'\n")
        with pytest.raises(SettingsError, match="not a valid format string"):
            load_settings(path)

    def test_empty_markup_must_be_string(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, "[render]\nempty_markup = 5\n")
        with pytest.raises(SettingsError, match="empty_markup"):
            load_settings(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "absent.toml"
        with pytest.raises(SettingsError, match="cannot read") as exc_info:
            load_settings(path)
        assert exc_info.value.context.file == path

    def test_loaded_settings_render_empty_input(self, tmp_path: Path) -> None:
        from jls_railroad.render.adapter import RenderAdapter

        path = write_settings(tmp_path, "[render]\nempty_markup = '<!-- none -->'\n")
        result = RenderAdapter(settings=load_settings(path)).render(None)
        assert result.ok
        assert result.text == "<!-- none -->"

    def test_error_names_file(self, tmp_path: Path) -> None:
        path = write_settings(tmp_path, '[render]\ndiagram_type = "fancy"\n')
        with pytest.raises(SettingsError) as exc_info:
            load_settings(path)
        assert exc_info.value.context.file == path
        assert str(path) in str(exc_info.value)


class TestLogLevel:
    def test_default(self, monkeypatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert log_level_from_env() == logging.WARNING

    def test_named_level(self, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert log_level_from_env() == logging.DEBUG

    def test_unknown_level(self, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert log_level_from_env(logging.ERROR) == logging.ERROR
