"""Pydantic models describing the WordPress settings a manifest must carry.

The constants here are written verbatim into composer.json, so they must
match what composer/installers and wpackagist expect.
"""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

WPACKAGIST_URL = "https://wpackagist.org"
WPACKAGIST_PATTERN = re.compile(r"^https?://wpackagist\.org/?$")
WPACKAGIST_REPOSITORY_NAME = "wpackagist"

PLUGIN_TYPE = "type:wordpress-plugin"
THEME_TYPE = "type:wordpress-theme"

INSTALL_DIR_SUFFIX = "wp"


def plugin_path(public_dir: str) -> str:
    """Return the installer path template for WordPress plugins.

    The ``{$name}`` token is the placeholder composer/installers expands
    to the package name, so it is written literally rather than as a
    plain ``{name}``.

    Args:
        public_dir: Web root the path is built under.

    Returns:
        The template, e.g. ``public/wp/wp-content/plugins/{$name}/``.
    """
    return f"{public_dir}/wp/wp-content/plugins/{{$name}}/"


def theme_path(public_dir: str) -> str:
    """Return the installer path template for WordPress themes.

    Uses the same composer/installers ``{$name}`` token as plugin_path.
    """
    return f"{public_dir}/themes/{{$name}}/"


class DirectiveKind(str, Enum):
    """The settings applied by a reconciliation, in application order."""

    public_dir = "public-dir"
    install_dir = "wordpress-install-dir"
    repository = "repository"
    installer_paths = "installer-paths"
    sort_packages = "sort-packages"


class Directives(BaseModel):
    """Target state for a reconciliation.

    Attributes:
        public_dir: Web root to declare when the manifest has none. May be
            None when the manifest already declares one.
        repository_url: URL of the package index entry to add.
    """

    model_config = ConfigDict(frozen=True)

    public_dir: str | None = Field(
        default=None,
        description="Public directory (web root) to declare when unset",
    )
    repository_url: str = Field(
        default=WPACKAGIST_URL,
        description="URL of the repository entry to add when missing",
    )

    def repository_entry(self) -> dict[str, str]:
        """Build the repository object appended to ``repositories``."""
        return {"type": "composer", "url": self.repository_url}


class PresenceChecks(BaseModel):
    """Read-only view of which directives a manifest already satisfies."""

    public_dir: bool
    install_dir: bool
    repository: bool
    sort_packages: bool

    @property
    def satisfied(self) -> bool:
        """True when every check passes and nothing needs writing."""
        return self.public_dir and self.install_dir and self.repository and self.sort_packages


class ReconcileResult(BaseModel):
    """Outcome of reconciling a manifest.

    Attributes:
        manifest: The reconciled manifest tree.
        changed: Whether anything was modified.
        applied: Directives that were applied, in order.
    """

    manifest: dict[str, Any]
    changed: bool = False
    applied: list[DirectiveKind] = Field(default_factory=list)
