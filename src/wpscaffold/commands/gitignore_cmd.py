"""wpscaffold gitignore command - install the WordPress .gitignore template."""

from pathlib import Path

import typer

from wpscaffold.models import ManifestError, load_config
from wpscaffold.services import ComposerConfigurator, GitignoreService
from wpscaffold.utils import console, get_project_root, print_error, print_success


def gitignore(
    template: Path = typer.Argument(..., help="Path to the .gitignore template."),
    path: Path | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Project directory (default: nearest directory with composer.json).",
    ),
    public_dir: str | None = typer.Option(
        None,
        "--public-dir",
        help="Public directory substituted for {{ APP_PUBLIC }}.",
    ),
) -> None:
    """Write the project .gitignore from a template.

    An existing .gitignore is merged with the template; its own rules are
    kept under '# User rules'.
    """
    if not template.is_file():
        print_error(f"Template not found: {template}")
        raise typer.Exit(1)

    project_root = path or get_project_root()
    configurator = ComposerConfigurator(
        project_root=project_root,
        config=load_config(project_root),
        interactive=console.is_interactive,
    )

    try:
        manifest = configurator.read_manifest() if configurator.manifest_path.exists() else None
        resolved = configurator.resolver.resolve(manifest, explicit=public_dir)
    except ManifestError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    written = GitignoreService(project_root=project_root).install(
        template, {"APP_PUBLIC": resolved}
    )
    print_success(f"Wrote {written}")
