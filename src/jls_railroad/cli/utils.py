"""
Shared CLI utilities.
"""

import logging
import platform
from pathlib import Path

import typer

from jls_railroad._version import get_version
from jls_railroad.core.settings import log_level_from_env


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        try:
            import jls_railroad

            install_location = Path(jls_railroad.__file__).parent.parent.parent
        except Exception:
            install_location = Path.cwd()

        # Check the drawing library without building anything
        renderer = "not installed (pip install railroad-diagrams)"
        try:
            from jls_railroad.render.capability import RailroadCapability

            capability = RailroadCapability()
            missing = capability.missing_constructors()
            renderer = "railroad-diagrams"
            if missing:
                renderer += f" (missing: {', '.join(missing)})"
        except ImportError:
            pass

        typer.echo(f"jls-railroad version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")
        typer.echo(f"  Renderer:      {renderer}")

        raise typer.Exit()


def configure_logging() -> None:
    """Configure root logging once, honouring JLS_RAILROAD_LOG_LEVEL."""
    logging.basicConfig(
        level=log_level_from_env(),
        format="%(levelname)s %(name)s: %(message)s",
    )
