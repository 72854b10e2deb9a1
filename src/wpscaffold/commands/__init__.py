"""wpscaffold CLI commands."""

from wpscaffold.commands.check_cmd import check
from wpscaffold.commands.configure_cmd import configure
from wpscaffold.commands.gitignore_cmd import gitignore

__all__ = ["check", "configure", "gitignore"]
