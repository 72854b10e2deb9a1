"""Service for configuring a project's composer.json on disk.

Reads the manifest, reconciles it and writes it back once, only when
something changed.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, PrivateAttr

from wpscaffold.models.config import ScaffoldConfig
from wpscaffold.models.directives import Directives, PresenceChecks, ReconcileResult
from wpscaffold.models.manifest import Manifest, load_manifest, save_manifest
from wpscaffold.services.public_dir import PublicDirectoryResolver
from wpscaffold.services.reconciler import ManifestReconciler

logger = logging.getLogger(__name__)


class ComposerConfigurator(BaseModel):
    """Service for keeping a project's composer.json configured for WordPress.

    Attributes:
        project_root: Directory containing the manifest.
        config: Project configuration.
        interactive: Whether the user may be prompted for missing values.
        reconciler: The reconciler used to compute the new manifest.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    project_root: Path
    config: ScaffoldConfig = ScaffoldConfig()
    interactive: bool = False
    reconciler: ManifestReconciler = ManifestReconciler()

    _resolver: PublicDirectoryResolver | None = PrivateAttr(default=None)

    @property
    def manifest_path(self) -> Path:
        """Path to the manifest file."""
        return self.project_root / self.config.manifest

    @property
    def resolver(self) -> PublicDirectoryResolver:
        """The public directory resolver for this project."""
        if self._resolver is None:
            self._resolver = PublicDirectoryResolver(
                project_root=self.project_root,
                config=self.config,
                interactive=self.interactive,
            )
        return self._resolver

    def read_manifest(self) -> Manifest:
        """Read the manifest from disk.

        Raises:
            FileNotFoundError: If the manifest doesn't exist.
            MalformedManifestError: If it isn't a JSON object.
        """
        return load_manifest(self.manifest_path)

    def check(self) -> PresenceChecks:
        """Report which directives the manifest on disk already satisfies."""
        return self.reconciler.check(self.read_manifest())

    def configure(self, public_dir: str | None = None, dry_run: bool = False) -> ReconcileResult:
        """Reconcile the manifest and write it back if it changed.

        Args:
            public_dir: Public directory to use when the manifest has none.
            dry_run: Compute the result without writing it.

        Returns:
            The reconciliation result.

        Raises:
            FileNotFoundError: If the manifest doesn't exist.
            ManifestError: If the manifest can't be reconciled.
        """
        manifest = self.read_manifest()
        checks = self.reconciler.check(manifest)

        if checks.satisfied:
            logger.debug(f"{self.manifest_path} already configured")
            return ReconcileResult(manifest=manifest, changed=False)

        directives = Directives(public_dir=self.resolver.resolve(manifest, explicit=public_dir))
        result = self.reconciler.reconcile(manifest, directives)

        if result.changed and not dry_run:
            save_manifest(result.manifest, self.manifest_path)
            logger.info(f"Updated {self.manifest_path}")

        return result

    def get_wordpress_install_dir(self) -> str | None:
        """Return the declared WordPress install directory, if any."""
        extra = self.read_manifest().get("extra")
        if not isinstance(extra, dict):
            return None
        return extra.get("wordpress-install-dir")
