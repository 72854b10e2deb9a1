"""Shared pytest fixtures for wpscaffold tests."""

import json
import re
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner


def strip_ansi(text: str) -> str:
    """Strip ANSI escape codes from text."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def write_manifest(project_root: Path, data: dict[str, Any]) -> Path:
    """Write a composer.json into a project directory.

    Args:
        project_root: Directory to write into.
        data: Manifest content.

    Returns:
        Path to the written composer.json.
    """
    path = project_root / "composer.json"
    path.write_text(json.dumps(data, indent=4) + "\n")
    return path


def read_manifest(project_root: Path) -> dict[str, Any]:
    """Read composer.json from a project directory."""
    return json.loads((project_root / "composer.json").read_text())


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner for testing commands."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory.

    Args:
        tmp_path: pytest's built-in tmp_path fixture.

    Returns:
        Path to the temporary project directory.
    """
    return tmp_path


@pytest.fixture
def composer_project(temp_project: Path) -> Path:
    """Create a temporary project with a bare composer.json.

    Args:
        temp_project: Temporary project directory.

    Returns:
        Path to the project directory.
    """
    write_manifest(
        temp_project,
        {
            "name": "acme/site",
            "require": {"wpackagist-plugin/akismet": "^5.0", "johnpbloch/wordpress": "^6.4"},
        },
    )
    return temp_project


@pytest.fixture
def configured_manifest() -> dict[str, Any]:
    """A manifest that already satisfies every presence check."""
    return {
        "name": "acme/site",
        "repositories": [{"type": "composer", "url": "https://wpackagist.org"}],
        "require": {"johnpbloch/wordpress": "^6.4"},
        "config": {"sort-packages": True},
        "extra": {
            "public-dir": "public",
            "wordpress-install-dir": "public/wp",
        },
    }


@pytest.fixture
def configured_project(temp_project: Path, configured_manifest: dict[str, Any]) -> Path:
    """Create a temporary project whose composer.json is fully configured."""
    write_manifest(temp_project, configured_manifest)
    return temp_project
