"""
Diagram browsing commands: render, ebnf, sections, export.
"""

import dataclasses
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from jls_railroad.catalog import GrammarCatalog, load_catalog
from jls_railroad.core.errors import SettingsError
from jls_railroad.core.settings import RenderSettings, load_settings

logger = logging.getLogger(__name__)
console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to a jls-railroad.toml settings file"),
]


def _settings_or_exit(config: Path | None) -> RenderSettings:
    try:
        return load_settings(config)
    except SettingsError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def render_command(
    name: Annotated[str, typer.Argument(help="Rule name, e.g. ClassDeclaration")],
    standalone: Annotated[
        bool, typer.Option("--standalone", help="Emit a standalone SVG with embedded CSS")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """
    Print the SVG railroad diagram for one rule.

    Unknown rules render the placeholder diagram.
    """
    settings = _settings_or_exit(config)
    if standalone:
        settings = dataclasses.replace(settings, standalone=True)

    result = load_catalog(settings).markup(name)
    typer.echo(result.text)
    if not result.ok:
        raise typer.Exit(code=1)


def ebnf_command(
    name: Annotated[str, typer.Argument(help="Rule name, e.g. ClassDeclaration")],
) -> None:
    """Print the EBNF definition for one rule."""
    from jls_railroad.grammar import build_ebnf_store

    text = build_ebnf_store().get(name)
    if text is None:
        typer.secho(f"No EBNF definition for {name}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(text)


def sections_command(
    query: Annotated[
        str, typer.Argument(help="Case-insensitive substring to filter rule names")
    ] = "",
) -> None:
    """List grammar sections and their rules."""
    from jls_railroad.grammar import build_section_index

    index = build_section_index()
    filtered = index.filtered(query)
    active = bool(query.strip())

    table = Table(title=f"Rules matching '{query.strip()}'" if active else "Grammar Sections")
    table.add_column("Section", style="cyan")
    table.add_column("Title")
    table.add_column("Rules", justify="right")
    if active:
        table.add_column("Matches")

    shown = 0
    for section in index.sections:
        names = filtered[section.id]
        if active and not names:
            continue
        shown += 1
        if active:
            table.add_row(section.id, section.title, str(len(names)), ", ".join(names))
        else:
            table.add_row(section.id, section.title, str(len(names)))

    if active and not shown:
        console.print(f"No rules match '{query.strip()}'", style="yellow", markup=False)
        return

    console.print(table)


def _write_index(catalog: GrammarCatalog, output_dir: Path) -> Path:
    lines = ["# Java SE 25 Grammar", ""]
    for view in catalog.section_views():
        lines.append(f"## {view.title}")
        lines.append("")
        for name in view.rules:
            lines.append(f"- [{name}]({name}.svg) ([EBNF]({name}.ebnf))")
        lines.append("")
    path = output_dir / "index.md"
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def export_command(
    output_dir: Annotated[Path, typer.Argument(help="Directory to write diagrams into")],
    config: ConfigOption = None,
) -> None:
    """
    Write an SVG and an EBNF file for every rule, plus an index.md.

    Rules that fail to render are reported and the command exits 1; all
    other rules are still written.
    """
    settings = _settings_or_exit(config)
    catalog = load_catalog(settings)
    output_dir.mkdir(parents=True, exist_ok=True)

    failed: list[str] = []
    names: list[str] = []
    # A rule listed in several sections is written once, under its first section
    for section in catalog.sections.sections:
        for name in section.rules:
            if name in names:
                continue
            names.append(name)
            view = catalog.rule_view(name, section=section.id)
            (output_dir / f"{name}.svg").write_text(view.markup.text, encoding="utf-8")
            if view.ebnf is not None:
                (output_dir / f"{name}.ebnf").write_text(view.ebnf + "\n", encoding="utf-8")
            if not view.markup.ok:
                logger.warning(view.markup.message)
                failed.append(name)

    index_path = _write_index(catalog, output_dir)
    logger.info(f"Wrote index to {index_path}")

    typer.echo(f"Exported {len(names) - len(failed)} of {len(names)} rules to {output_dir}")
    if failed:
        typer.secho(f"Failed to render: {', '.join(failed)}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
