"""wpscaffold utilities."""

from wpscaffold.utils.console import (
    configure_logging,
    console,
    print_error,
    print_success,
    print_warning,
)
from wpscaffold.utils.files import get_project_root, read_file, write_file

__all__ = [
    "configure_logging",
    "console",
    "get_project_root",
    "print_error",
    "print_success",
    "print_warning",
    "read_file",
    "write_file",
]
