"""File operation utilities for wpscaffold."""

from pathlib import Path

from wpscaffold.models.config import CONFIG_FILE_NAME
from wpscaffold.models.manifest import DEFAULT_MANIFEST_NAME


def read_file(path: Path | str, encoding: str = "utf-8") -> str:
    """Read entire file contents as a string.

    Args:
        path: Path to the file to read.
        encoding: Character encoding to use (default: utf-8).

    Returns:
        The file contents as a string.

    Raises:
        FileNotFoundError: If the file does not exist.
        PermissionError: If the file cannot be read due to permissions.
    """
    return Path(path).read_text(encoding=encoding)


def write_file(path: Path | str, content: str, encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories if needed.

    Args:
        path: Path to the file to write.
        content: Content to write to the file.
        encoding: Character encoding to use (default: utf-8).
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)


def get_project_root(
    start: Path | None = None, manifest_name: str = DEFAULT_MANIFEST_NAME
) -> Path:
    """Find the project root directory.

    Walks up the directory tree looking for the manifest file or a
    wpscaffold.yaml. Projects whose wpscaffold.yaml renames the manifest
    are still found through the config file.

    Args:
        start: Directory to start from (default: current working directory).
        manifest_name: Manifest file name to look for (default: composer.json).

    Returns:
        Path to the nearest directory containing either marker, or the
        start directory if none is found.
    """
    origin = (start or Path.cwd()).resolve()
    current = origin
    markers = (manifest_name, CONFIG_FILE_NAME)

    while current != current.parent:
        if any((current / marker).exists() for marker in markers):
            return current
        current = current.parent

    return origin
