import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .errors import ErrorContext, SettingsError

DEFAULT_SETTINGS_FILE = "jls-railroad.toml"
LOG_LEVEL_ENV = "JLS_RAILROAD_LOG_LEVEL"

_DIAGRAM_TYPES = ("simple", "complex")
_EMPTY_MARKUP = "<!-- empty diagram -->"


@dataclass(frozen=True)
class RenderSettings:
    """Options passed through to the diagram-drawing capability."""

    diagram_type: str = "simple"  # "simple" | "complex" start/end markers
    standalone: bool = False  # Embed default CSS in each <svg>
    nonterminal_href: str | None = None  # e.g. "#rule-{name}" to link references
    empty_markup: str = _EMPTY_MARKUP

    def href_for(self, name: str) -> str | None:
        if self.nonterminal_href is None:
            return None
        return self.nonterminal_href.format(name=name)


def load_settings(path: Path | None = None) -> RenderSettings:
    """
    Load render settings from the ``[render]`` table of a TOML file.

    With no path, ``jls-railroad.toml`` in the current directory is used
    when it exists; otherwise defaults apply.

    Raises:
        SettingsError: If the file is not valid TOML or holds invalid values
    """
    if path is None:
        candidate = Path.cwd() / DEFAULT_SETTINGS_FILE
        if not candidate.exists():
            return RenderSettings()
        path = candidate

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"cannot read settings file: {e}", ErrorContext(file=path)) from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"invalid TOML: {e}", ErrorContext(file=path)) from e

    render = data.get("render", {})
    if not isinstance(render, dict):
        raise SettingsError("[render] must be a table", ErrorContext(file=path))

    diagram_type = render.get("diagram_type", "simple")
    if diagram_type not in _DIAGRAM_TYPES:
        raise SettingsError(
            f"diagram_type must be one of {list(_DIAGRAM_TYPES)}, got {diagram_type!r}",
            ErrorContext(file=path),
        )

    standalone = render.get("standalone", False)
    if not isinstance(standalone, bool):
        raise SettingsError("standalone must be a boolean", ErrorContext(file=path))

    href = render.get("nonterminal_href")
    if href is not None:
        _check_href(href, path)

    empty_markup = render.get("empty_markup", _EMPTY_MARKUP)
    if not isinstance(empty_markup, str):
        raise SettingsError("empty_markup must be a string", ErrorContext(file=path))

    return RenderSettings(
        diagram_type=diagram_type,
        standalone=standalone,
        nonterminal_href=href,
        empty_markup=empty_markup,
    )


def _check_href(href: object, path: Path) -> None:
    if not isinstance(href, str):
        raise SettingsError("nonterminal_href must be a string", ErrorContext(file=path))
    if "{name}" not in href:
        raise SettingsError(
            "nonterminal_href must contain a {name} placeholder", ErrorContext(file=path)
        )
    # Only {name} may be substituted
    try:
        href.format(name="x")
    except (KeyError, IndexError, AttributeError, ValueError) as e:
        raise SettingsError(
            f"nonterminal_href is not a valid format string: {e!r}", ErrorContext(file=path)
        ) from e


def log_level_from_env(default: int = logging.WARNING) -> int:
    """Log level named by JLS_RAILROAD_LOG_LEVEL (e.g. "DEBUG"), or the default."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default
