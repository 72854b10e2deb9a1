"""Deterministic key ordering for composer.json.

Composer ignores key order, but a stable order keeps the file readable
and diffs small.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from wpscaffold.models.manifest import MalformedManifestError

COMPOSER_ORDER = [
    "name",
    "type",
    "description",
    "keywords",
    "version",
    "license",
    "homepage",
    "time",
    "authors",
    "repositories",
    "minimum-stability",
    "prefer-stable",
    "support",
    "require",
    "require-dev",
    "conflict",
    "replace",
    "provide",
    "suggest",
    "autoload",
    "autoload-dev",
    "bin",
    "archive",
    "non-feature-branches",
    "config",
    "extra",
    "scripts",
]

AUTOLOAD_ORDER = [
    "psr-4",
    "psr-0",
    "classmap",
    "exclude-from-classmap",
    "files",
]

AUTOLOAD_PROPERTIES = ("autoload", "autoload-dev")

ALPHABETICAL_PROPERTIES = (
    "support",
    "require",
    "require-dev",
    "conflict",
    "replace",
    "provide",
    "suggest",
)


def sort_by_order(mapping: Mapping[str, Any], order: Sequence[str]) -> dict[str, Any]:
    """Reorder a mapping's keys using a list of known keys.

    Known keys come first in the order given; keys the list doesn't name
    follow in their original relative order. Values are untouched.

    Args:
        mapping: Mapping to reorder.
        order: Known keys, in the desired order.

    Returns:
        A new dict with the same items in canonical order.
    """
    known = [key for key in order if key in mapping]
    known_set = set(order)
    unknown = [key for key in mapping if key not in known_set]
    return {key: mapping[key] for key in known + unknown}


def sort_alphabetically(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``mapping`` with keys in ascending order."""
    return {key: mapping[key] for key in sorted(mapping)}


def _require_mapping(manifest: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = manifest[key]
    if not isinstance(value, Mapping):
        raise MalformedManifestError(f"'{key}' must be an object, got {type(value).__name__}")
    return value


def sort_properties(manifest: Mapping[str, Any]) -> dict[str, Any]:
    """Apply the full canonical ordering pass to a manifest.

    Orders the top-level keys, the children of ``autoload`` and
    ``autoload-dev``, and sorts the package link sections by name.

    Args:
        manifest: Manifest tree.

    Returns:
        A new manifest dict in canonical order.

    Raises:
        MalformedManifestError: If an ordered section is not an object.
    """
    result = sort_by_order(manifest, COMPOSER_ORDER)

    # Empty sections may be serialized as [] by older tooling.
    for key in AUTOLOAD_PROPERTIES:
        if key in result and result[key] != []:
            result[key] = sort_by_order(_require_mapping(result, key), AUTOLOAD_ORDER)

    for key in ALPHABETICAL_PROPERTIES:
        if key in result and result[key] != []:
            result[key] = sort_alphabetically(_require_mapping(result, key))

    return result
