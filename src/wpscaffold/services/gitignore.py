"""Service for installing and merging the project .gitignore.

The WordPress skeleton ships a .gitignore template with ``{{ KEY }}``
placeholders. On first install the compiled template is written as-is;
later installs merge it with the existing file, keeping the user's own
rules in a ``# User rules`` group.
"""

import logging
import re
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from wpscaffold.utils import read_file, write_file

logger = logging.getLogger(__name__)

USER_RULES_GROUP = "user rules"

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*([A-Za-z0-9_-]+)\s*}}")
_HEADING_PATTERN = re.compile(r"^#\s*(.*)")


def compile_template(template: str, data: Mapping[str, str]) -> str:
    """Replace ``{{ KEY }}`` placeholders with values from ``data``.

    Placeholders without a value are left untouched.

    Args:
        template: Template text.
        data: Placeholder values.

    Returns:
        The compiled text.
    """

    def replace(match: re.Match[str]) -> str:
        return data.get(match.group(1), match.group(0))

    return _PLACEHOLDER_PATTERN.sub(replace, template)


def sort_rules(rules: list[str]) -> list[str]:
    """Sort rules by length, then alphabetically."""
    return sorted(rules, key=lambda rule: (len(rule), rule))


def merge_gitignore(template: str, existing: str) -> str:
    """Merge a compiled template with an existing .gitignore.

    Rules are grouped under the ``#`` comment that precedes them. Blank
    lines and repeated rules are dropped. Rules from the existing file
    that precede any heading land in the user rules group.

    Args:
        template: Compiled template content.
        existing: Current .gitignore content.

    Returns:
        The merged .gitignore content.
    """
    lines = re.split(r"\r?\n", f"{template}\n# User rules\n{existing}")
    groups: dict[str, list[str]] = {USER_RULES_GROUP: []}
    seen: set[str] = set()
    group = USER_RULES_GROUP

    for line in lines:
        heading = _HEADING_PATTERN.match(line)
        if heading:
            group = heading.group(1).lower()
            groups.setdefault(group, [])
        elif line.strip() and line not in seen:
            seen.add(line)
            groups[group].append(line)

    output: list[str] = []
    for name, rules in groups.items():
        if not rules or name == USER_RULES_GROUP:
            continue
        output.append(f"# {name.capitalize()}")
        output.extend(sort_rules(rules))
        output.append("")

    output.append("# User rules")
    output.extend(sort_rules(groups[USER_RULES_GROUP]))
    output.append("")

    return "\n".join(output)


class GitignoreService(BaseModel):
    """Service for writing the project .gitignore from a template."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    project_root: Path

    @property
    def path(self) -> Path:
        """Path to the project .gitignore."""
        return self.project_root / ".gitignore"

    def install(self, template_path: Path, data: Mapping[str, str]) -> Path:
        """Write or merge the .gitignore.

        Args:
            template_path: Path to the .gitignore template.
            data: Placeholder values, e.g. ``APP_PUBLIC``.

        Returns:
            Path to the written .gitignore.

        Raises:
            FileNotFoundError: If the template doesn't exist.
        """
        compiled = compile_template(read_file(template_path), data)

        if not self.path.exists():
            write_file(self.path, compiled)
            logger.info(f"Created {self.path}")
            return self.path

        write_file(self.path, merge_gitignore(compiled, read_file(self.path)))
        logger.info(f"Merged {template_path} into {self.path}")
        return self.path
