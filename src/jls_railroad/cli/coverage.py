"""CLI command for the grammar coverage check."""

import typer

from jls_railroad.core.coverage import check_coverage


def coverage_command() -> None:
    """
    Check that every rule has both a diagram factory and an EBNF definition.

    Exit code 0 when the two rule sets match, 1 on any mismatch.
    """
    typer.echo("Checking grammar coverage...")
    typer.echo("")

    try:
        from jls_railroad.grammar import build_registry

        diagram_names = build_registry().names()
    except (ImportError, OSError) as e:
        typer.secho(f"Failed to load diagram factories: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        from jls_railroad.grammar import build_ebnf_store

        ebnf_names = build_ebnf_store().names()
    except (ImportError, OSError) as e:
        typer.secho(f"Failed to load EBNF definitions: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    report = check_coverage(diagram_names, ebnf_names)
    for line in report.format_lines():
        typer.echo(line)

    raise typer.Exit(code=report.exit_code)
