"""wpscaffold data models."""

from wpscaffold.models.config import (
    CONFIG_FILE_NAME,
    ScaffoldConfig,
    load_config,
    parse_config,
)
from wpscaffold.models.directives import (
    PLUGIN_TYPE,
    THEME_TYPE,
    WPACKAGIST_PATTERN,
    WPACKAGIST_URL,
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
    ManifestError,
    MissingPublicDirectoryError,
    dump_manifest,
    load_manifest,
    save_manifest,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DirectiveKind",
    "Directives",
    "MalformedManifestError",
    "Manifest",
    "ManifestError",
    "MissingPublicDirectoryError",
    "PLUGIN_TYPE",
    "PresenceChecks",
    "ReconcileResult",
    "ScaffoldConfig",
    "THEME_TYPE",
    "WPACKAGIST_PATTERN",
    "WPACKAGIST_URL",
    "dump_manifest",
    "load_config",
    "load_manifest",
    "parse_config",
    "plugin_path",
    "save_manifest",
    "theme_path",
]
