"""Pydantic model for the optional wpscaffold.yaml project configuration."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from wpscaffold.models.manifest import DEFAULT_MANIFEST_NAME

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "wpscaffold.yaml"

COMMON_PUBLIC_DIRS = [
    "public",
    "public_html",
    "htdocs",
    "httpdocs",
    "html",
    "web",
    "www",
]


class ScaffoldConfig(BaseModel):
    """Project-level settings for wpscaffold.

    Attributes:
        manifest: Manifest file name relative to the project root.
        public_dir: Public directory to use when the manifest declares none.
        public_dir_candidates: Directories checked to infer the public dir.
        default_public_dir: Fallback public dir. None makes a missing public
            dir a hard failure in non-interactive runs.
    """

    manifest: str = Field(default=DEFAULT_MANIFEST_NAME, description="Manifest file name")
    public_dir: str | None = Field(default=None, description="Explicit public directory")
    public_dir_candidates: list[str] = Field(
        default_factory=lambda: list(COMMON_PUBLIC_DIRS),
        description="Directories checked on disk to infer the public directory",
    )
    default_public_dir: str | None = Field(
        default=COMMON_PUBLIC_DIRS[0],
        description="Fallback public directory when nothing can be inferred",
    )


def parse_config(content: str) -> ScaffoldConfig:
    """Parse wpscaffold.yaml content.

    Args:
        content: Raw YAML text.

    Returns:
        The validated config, or defaults if the content is empty or
        malformed.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring malformed {CONFIG_FILE_NAME}: {e}")
        return ScaffoldConfig()

    if data is None:
        return ScaffoldConfig()

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {CONFIG_FILE_NAME}: expected a mapping")
        return ScaffoldConfig()

    try:
        return ScaffoldConfig.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid {CONFIG_FILE_NAME}: {e}")
        return ScaffoldConfig()


def load_config(project_root: Path) -> ScaffoldConfig:
    """Load wpscaffold.yaml from a project root.

    Args:
        project_root: Directory containing the config file.

    Returns:
        The validated config, or defaults if the file is missing or
        malformed.
    """
    path = project_root / CONFIG_FILE_NAME
    if not path.exists():
        return ScaffoldConfig()

    return parse_config(path.read_text(encoding="utf-8"))
