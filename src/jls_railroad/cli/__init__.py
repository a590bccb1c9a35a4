"""
jls-railroad CLI.

- coverage.py: Grammar coverage check
- diagrams.py: render, ebnf, sections and export commands
- utils.py: Shared utilities
"""

import typer

from jls_railroad._version import get_version
from jls_railroad.cli.coverage import coverage_command
from jls_railroad.cli.diagrams import (
    ebnf_command,
    export_command,
    render_command,
    sections_command,
)
from jls_railroad.cli.utils import configure_logging, version_callback

__version__ = get_version()

app = typer.Typer(
    help="""jls-railroad – railroad diagrams for the Java SE 25 grammar

Commands:
  • coverage  Check every rule has a diagram and an EBNF definition
  • render    Print one rule's SVG diagram
  • ebnf      Print one rule's EBNF definition
  • sections  List grammar sections, optionally filtered
  • export    Write every diagram to a directory
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """jls-railroad main callback for global options."""
    configure_logging()


app.command(name="coverage")(coverage_command)
app.command(name="render")(render_command)
app.command(name="ebnf")(ebnf_command)
app.command(name="sections")(sections_command)
app.command(name="export")(export_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "version_callback",
]
