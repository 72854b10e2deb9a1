"""wpscaffold check command - report which settings composer.json lacks."""

from pathlib import Path

import typer

from wpscaffold.models import ManifestError, load_config
from wpscaffold.services import ComposerConfigurator
from wpscaffold.utils import console, get_project_root, print_error, print_success, print_warning

_CHECK_LABELS = {
    "public_dir": "extra.public-dir",
    "install_dir": "extra.wordpress-install-dir",
    "repository": "wpackagist repository",
    "sort_packages": "config.sort-packages",
}


def check(
    path: Path | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Project directory (default: nearest directory with composer.json).",
    ),
) -> None:
    """Check whether composer.json is configured for WordPress.

    Exits with status 1 if any setting is missing.
    """
    project_root = path or get_project_root()
    configurator = ComposerConfigurator(project_root=project_root, config=load_config(project_root))

    try:
        checks = configurator.check()
    except FileNotFoundError as e:
        print_error(f"No manifest found at {configurator.manifest_path}")
        raise typer.Exit(1) from e
    except ManifestError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    for field, label in _CHECK_LABELS.items():
        if getattr(checks, field):
            console.print(f"  [green]✓[/green] {label}")
        else:
            console.print(f"  [red]✗[/red] {label} [dim](missing)[/dim]")

    console.print()
    if checks.satisfied:
        print_success(f"{configurator.config.manifest} is configured")
        return

    print_warning("Run [bold]wpscaffold configure[/bold] to add the missing settings.")
    raise typer.Exit(1)
