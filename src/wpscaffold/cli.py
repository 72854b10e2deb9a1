"""wpscaffold CLI entry point.

This module provides the main entry point for the wpscaffold CLI
application, a tool for keeping a WordPress project's composer.json
configured.
"""

import logging

import typer

from wpscaffold import __version__
from wpscaffold.commands import check, configure, gitignore
from wpscaffold.utils import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="wpscaffold",
    help="wpscaffold - Composer configuration for WordPress projects",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Handle the version flag callback.

    Args:
        value: Whether the version flag was provided.

    Raises:
        typer.Exit: Always raised after printing version when value is True.
    """
    if value:
        typer.echo(f"wpscaffold {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """wpscaffold - Composer configuration for WordPress projects."""
    configure_logging(verbose)


app.command(name="configure", help="Configure composer.json for WordPress")(configure)
app.command(name="check", help="Check whether composer.json is configured")(check)
app.command(name="gitignore", help="Install the WordPress .gitignore template")(gitignore)


if __name__ == "__main__":
    app()
