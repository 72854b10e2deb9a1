"""Manifest reconciliation for WordPress projects.

This module computes the composer.json a WordPress project needs: a
declared public directory, the WordPress install directory, the
wpackagist repository, installer paths for plugins and themes, and
sorted packages. It works purely on in-memory trees; reading and writing
the file is the configurator's job.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from wpscaffold.models.directives import (
    INSTALL_DIR_SUFFIX,
    PLUGIN_TYPE,
    THEME_TYPE,
    WPACKAGIST_PATTERN,
    WPACKAGIST_REPOSITORY_NAME,
    DirectiveKind,
    Directives,
    PresenceChecks,
    ReconcileResult,
    plugin_path,
    theme_path,
)
from wpscaffold.models.manifest import (
    MalformedManifestError,
    Manifest,
    MissingPublicDirectoryError,
)
from wpscaffold.services.ordering import sort_properties
from wpscaffold.services.tree_search import tree_contains

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """Check whether a manifest value counts as unset.

    None, False, zero, empty strings, "0" and empty containers are unset.
    """
    return not value or value == "0"


def _section(manifest: Manifest, key: str) -> dict[str, Any]:
    """Return a mutable mapping section, creating it if needed."""
    value = manifest.get(key)
    if value is None or value == []:
        value = {}
        manifest[key] = value
    if not isinstance(value, dict):
        raise MalformedManifestError(f"'{key}' must be an object, got {type(value).__name__}")
    return value


def _get_nested(manifest: Mapping[str, Any], section: str, key: str) -> Any:
    value = manifest.get(section)
    if value is None or value == []:
        return None
    if not isinstance(value, Mapping):
        raise MalformedManifestError(f"'{section}' must be an object, got {type(value).__name__}")
    return value.get(key)


def _free_repository_name(repositories: Mapping[str, Any]) -> str:
    """Pick a key for the wpackagist entry that leaves existing entries alone.

    Uses ``wpackagist`` when free, otherwise ``wpackagist-2``, ``wpackagist-3``
    and so on.
    """
    name = WPACKAGIST_REPOSITORY_NAME
    suffix = 1
    while name in repositories:
        suffix += 1
        name = f"{WPACKAGIST_REPOSITORY_NAME}-{suffix}"
    return name


class ManifestReconciler(BaseModel):
    """Service that brings a manifest in line with WordPress directives.

    Stateless: construct one and pass it to whatever needs it.
    """

    model_config = ConfigDict(frozen=True)

    def check(self, manifest: Manifest) -> PresenceChecks:
        """Evaluate the read-only presence checks.

        Args:
            manifest: Manifest tree to inspect.

        Returns:
            Which directives are already satisfied.

        Raises:
            MalformedManifestError: If ``extra`` or ``config`` is not an object.
        """
        repositories = manifest.get("repositories")
        return PresenceChecks(
            public_dir=not is_empty(_get_nested(manifest, "extra", "public-dir")),
            install_dir=not is_empty(_get_nested(manifest, "extra", "wordpress-install-dir")),
            repository=not is_empty(repositories)
            and tree_contains(repositories, WPACKAGIST_PATTERN),
            sort_packages=not is_empty(_get_nested(manifest, "config", "sort-packages")),
        )

    def reconcile(self, manifest: Manifest, directives: Directives) -> ReconcileResult:
        """Apply every unsatisfied directive and reorder the manifest.

        The input tree is not modified.

        Args:
            manifest: Current manifest tree.
            directives: Target state.

        Returns:
            The reconciled tree with the list of applied directives.

        Raises:
            MalformedManifestError: If a section has the wrong shape.
            MissingPublicDirectoryError: If a directive needs the public
                directory and neither the manifest nor the directives set it.
        """
        checks = self.check(manifest)
        if checks.satisfied:
            logger.debug("Manifest already configured, nothing to do")
            return ReconcileResult(manifest=manifest, changed=False)

        result = copy.deepcopy(manifest)
        applied: list[DirectiveKind] = []

        if not checks.public_dir:
            self._set_public_directory(result, directives)
            applied.append(DirectiveKind.public_dir)

        public_dir = str(_section(result, "extra")["public-dir"])

        if not checks.install_dir:
            _section(result, "extra")["wordpress-install-dir"] = (
                f"{public_dir}/{INSTALL_DIR_SUFFIX}"
            )
            applied.append(DirectiveKind.install_dir)

        if not checks.repository:
            self._add_repository(result, directives)
            applied.append(DirectiveKind.repository)

        if self._configure_installer_paths(result, public_dir):
            applied.append(DirectiveKind.installer_paths)

        if not checks.sort_packages:
            _section(result, "config")["sort-packages"] = True
            applied.append(DirectiveKind.sort_packages)

        for kind in applied:
            logger.info(f"Applied {kind.value}")

        return ReconcileResult(manifest=sort_properties(result), changed=True, applied=applied)

    def _set_public_directory(self, manifest: Manifest, directives: Directives) -> None:
        if is_empty(directives.public_dir):
            raise MissingPublicDirectoryError(
                "No public directory is declared in extra.public-dir and none was provided"
            )
        _section(manifest, "extra")["public-dir"] = directives.public_dir

    def _add_repository(self, manifest: Manifest, directives: Directives) -> None:
        entry = directives.repository_entry()
        repositories = manifest.get("repositories")

        if is_empty(repositories):
            manifest["repositories"] = [entry]
        elif isinstance(repositories, list):
            repositories.append(entry)
        elif isinstance(repositories, dict):
            repositories[_free_repository_name(repositories)] = entry
        else:
            raise MalformedManifestError(
                f"'repositories' must be a list or object, got {type(repositories).__name__}"
            )

    def _configure_installer_paths(self, manifest: Manifest, public_dir: str) -> bool:
        """Give the WordPress types exactly one installer path each.

        Returns:
            True if the installer paths changed.
        """
        extra = _section(manifest, "extra")
        existing = extra.get("installer-paths")
        if existing is None or existing == []:
            existing = {}
        if not isinstance(existing, dict):
            raise MalformedManifestError("'extra.installer-paths' must be an object")

        canonical = {PLUGIN_TYPE: plugin_path(public_dir), THEME_TYPE: theme_path(public_dir)}
        paths: dict[str, list[Any]] = {}

        for path, tags in existing.items():
            if not isinstance(tags, list):
                raise MalformedManifestError(
                    f"'extra.installer-paths.{path}' must be a list, got {type(tags).__name__}"
                )
            kept = [
                tag for tag in tags if not isinstance(tag, str) or canonical.get(tag, path) == path
            ]
            if len(kept) < len(tags):
                logger.debug(f"Moving WordPress types away from installer path {path}")
            if kept:
                paths[path] = kept

        for tag, path in canonical.items():
            path_tags = paths.setdefault(path, [])
            if tag not in path_tags:
                path_tags.append(tag)

        if paths == existing and "installer-paths" in extra:
            return False

        extra["installer-paths"] = paths
        return True


def reconcile(manifest: Manifest, directives: Directives) -> ReconcileResult:
    """Reconcile a manifest with a set of directives.

    Convenience function that creates a ManifestReconciler and reconciles.

    Args:
        manifest: Current manifest tree.
        directives: Target state.

    Returns:
        The reconciliation result.
    """
    return ManifestReconciler().reconcile(manifest, directives)
