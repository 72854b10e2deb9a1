"""Manifest tree types and composer.json persistence.

A manifest is the parsed composer.json: a plain ``dict`` whose insertion
order is the key order written back to disk. This module owns the
exceptions raised for unusable manifests and the load/save helpers.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

Manifest = dict[str, Any]

DEFAULT_MANIFEST_NAME = "composer.json"


class ManifestError(Exception):
    """Base exception for manifest problems."""


class MalformedManifestError(ManifestError):
    """Exception raised when the manifest tree has an unexpected shape.

    Raised when a value that must be a mapping is a scalar or list (or the
    other way round), or when the file is not a JSON object at all.
    """


class MissingPublicDirectoryError(ManifestError):
    """Exception raised when no public directory is known.

    The manifest does not declare one and none was supplied or could be
    inferred.
    """


def load_manifest(path: Path) -> Manifest:
    """Load a composer.json file, preserving key order.

    Args:
        path: Path to the manifest file.

    Returns:
        The manifest tree.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MalformedManifestError: If the content is not a JSON object.
    """
    content = path.read_text(encoding="utf-8")
    if not content.strip():
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedManifestError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedManifestError(f"{path} must contain a JSON object")

    return data


def dump_manifest(manifest: Manifest) -> str:
    """Serialize a manifest the way Composer writes it.

    Four space indentation, unescaped unicode and a trailing newline.

    Args:
        manifest: Manifest tree to serialize.

    Returns:
        The JSON text.
    """
    return json.dumps(manifest, indent=4, ensure_ascii=False) + "\n"


def save_manifest(manifest: Manifest, path: Path) -> None:
    """Write a manifest tree to disk.

    Args:
        manifest: Manifest tree to save
        path: Path to write the file to
    """
    logger.debug(f"Writing manifest to {path}")
    path.write_text(dump_manifest(manifest), encoding="utf-8")
