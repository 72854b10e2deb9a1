"""Rich console utilities for consistent terminal output.

This module provides a shared Rich Console instance, helper functions
for displaying formatted terminal output, and the logging setup used by
the CLI.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)

# Legacy Windows encodings that require special handling
LEGACY_WINDOWS_ENCODINGS = frozenset({"cp1252", "cp437", "ascii"})


def create_console() -> Console:
    """Create a Rich Console with appropriate settings for the current terminal.

    On Windows terminals with legacy encodings (cp1252, cp437, ascii), enables
    legacy_windows mode to avoid unicode encoding errors.

    Returns:
        Console: A configured Rich Console instance.
    """
    if sys.platform == "win32":
        encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
        encoding = encoding.lower().replace("-", "")

        if encoding in LEGACY_WINDOWS_ENCODINGS:
            return Console(legacy_windows=True)

    return Console()


console = create_console()


def configure_logging(verbose: bool = False) -> None:
    """Route log records through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    logger.debug("Verbose logging enabled")


def print_success(message: str) -> None:
    """Print a success message with a green checkmark.

    Args:
        message: The success message to display.
    """
    console.print(f"[bold green]✓[/bold green] {message}")


def print_error(message: str) -> None:
    """Print an error message with a red X.

    Args:
        message: The error message to display.
    """
    console.print(f"[bold red]✗[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message with a yellow warning sign.

    Args:
        message: The warning message to display.
    """
    console.print(f"[bold yellow]⚠[/bold yellow] {message}")
