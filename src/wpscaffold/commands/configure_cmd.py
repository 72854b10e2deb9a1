"""wpscaffold configure command - reconcile composer.json for WordPress.

This module implements the 'wpscaffold configure' command which adds the
public directory, WordPress install directory, wpackagist repository,
installer paths and package sorting to the project's composer.json.
"""

import logging
from pathlib import Path

import typer

from wpscaffold.models import DirectiveKind, ManifestError, load_config
from wpscaffold.services import ComposerConfigurator
from wpscaffold.utils import (
    console,
    get_project_root,
    print_error,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)

_DIRECTIVE_MESSAGES = {
    DirectiveKind.public_dir: "Set extra.public-dir",
    DirectiveKind.install_dir: "Set extra.wordpress-install-dir",
    DirectiveKind.repository: "Added the wpackagist repository",
    DirectiveKind.installer_paths: "Configured installer paths for plugins and themes",
    DirectiveKind.sort_packages: "Enabled config.sort-packages",
}


def configure(
    path: Path | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Project directory (default: nearest directory with composer.json).",
    ),
    public_dir: str | None = typer.Option(
        None,
        "--public-dir",
        help="Public directory (web root) to declare when composer.json has none.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would change without writing composer.json.",
    ),
    no_interaction: bool = typer.Option(
        False,
        "--no-interaction",
        "-n",
        help="Never prompt; fall back to defaults.",
    ),
) -> None:
    """Configure composer.json for a WordPress project.

    Only settings that are missing are written. When everything is already
    configured the file is left untouched.
    """
    project_root = path or get_project_root()
    configurator = ComposerConfigurator(
        project_root=project_root,
        config=load_config(project_root),
        interactive=not no_interaction and console.is_interactive,
    )

    if not configurator.manifest_path.exists():
        print_error(f"No manifest found at {configurator.manifest_path}")
        raise typer.Exit(1)

    try:
        result = configurator.configure(public_dir=public_dir, dry_run=dry_run)
    except ManifestError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if not result.changed:
        print_success(f"{configurator.config.manifest} is already configured")
        return

    for kind in result.applied:
        console.print(f"  [green]✓[/green] {_DIRECTIVE_MESSAGES[kind]}")

    console.print()
    if dry_run:
        print_warning(f"Dry run: {configurator.config.manifest} was not written")
    else:
        print_success(f"Updated {configurator.manifest_path}")
