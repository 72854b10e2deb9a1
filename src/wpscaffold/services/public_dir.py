"""Public directory (web root) resolution.

Works out which directory of the project is served by the web server,
from the manifest, the project config, the directories on disk, or by
asking the user.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, PrivateAttr
from rich.prompt import Prompt

from wpscaffold.models.config import ScaffoldConfig
from wpscaffold.models.manifest import Manifest, MissingPublicDirectoryError

logger = logging.getLogger(__name__)

PUBLIC_DIR_QUESTION = "What is the public directory (web root) for this project?"


def normalize_public_dir(value: str) -> str:
    """Strip surrounding slashes and whitespace from a public directory."""
    return value.strip().strip("/")


class PublicDirectoryResolver(BaseModel):
    """Service for resolving the project's public directory.

    Precedence: explicit value, manifest ``extra.public-dir``, config
    ``public_dir``, then a candidate directory found on disk (confirmed by
    prompt when interactive), then the configured fallback.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    project_root: Path
    config: ScaffoldConfig = ScaffoldConfig()
    interactive: bool = False

    _resolved: str | None = PrivateAttr(default=None)

    def detect(self) -> str | None:
        """Find the first candidate public directory that exists on disk.

        Returns:
            The candidate name, or None if none exist.
        """
        for candidate in self.config.public_dir_candidates:
            if (self.project_root / candidate).is_dir():
                logger.debug(f"Detected public directory: {candidate}")
                return candidate
        return None

    def resolve(self, manifest: Manifest | None = None, explicit: str | None = None) -> str:
        """Resolve the public directory, caching the answer.

        Args:
            manifest: Manifest tree that may already declare the directory.
            explicit: Value given on the command line, if any.

        Returns:
            The public directory, without leading or trailing slashes.

        Raises:
            MissingPublicDirectoryError: If nothing can be inferred, there is
                no fallback and the session is not interactive.
        """
        if self._resolved is None:
            resolved = normalize_public_dir(self._resolve(manifest, explicit) or "")
            if not resolved:
                raise MissingPublicDirectoryError("The public directory cannot be empty")
            self._resolved = resolved
        return self._resolved

    def _resolve(self, manifest: Manifest | None, explicit: str | None) -> str:
        if explicit:
            return explicit

        if manifest:
            extra = manifest.get("extra")
            if isinstance(extra, dict) and extra.get("public-dir"):
                return str(extra["public-dir"])

        if self.config.public_dir:
            return self.config.public_dir

        default = self.detect() or self.config.default_public_dir

        if self.interactive:
            return Prompt.ask(PUBLIC_DIR_QUESTION, default=default)

        if default is None:
            raise MissingPublicDirectoryError(
                "Could not determine the public directory. "
                "Pass --public-dir or set public_dir in wpscaffold.yaml."
            )

        return default
