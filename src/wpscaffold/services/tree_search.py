"""Depth-first pattern search over manifest subtrees.

A node is a scalar, a list of nodes, or a mapping of nodes. Only string
leaves are matched against the pattern.
"""

import re
from collections.abc import Iterator, Mapping
from typing import Any

Pattern = re.Pattern[str] | str


def _compile(pattern: Pattern) -> re.Pattern[str]:
    return re.compile(pattern) if isinstance(pattern, str) else pattern


def _children(node: Any) -> Iterator[tuple[Any, Any]]:
    if isinstance(node, Mapping):
        yield from node.items()
    elif isinstance(node, list | tuple):
        yield from enumerate(node)


def iter_leaves(node: Any) -> Iterator[Any]:
    """Yield every scalar leaf of a tree, depth first.

    Args:
        node: Root of the tree.

    Yields:
        Leaf values in document order.
    """
    if isinstance(node, Mapping | list | tuple):
        for _, child in _children(node):
            yield from iter_leaves(child)
    else:
        yield node


def tree_contains(node: Any, pattern: Pattern) -> bool:
    """Check whether any string leaf of a tree matches a pattern.

    Stops at the first match.

    Args:
        node: Root of the tree.
        pattern: Regular expression, compiled or as a string.

    Returns:
        True if some string leaf matches, False otherwise.
    """
    regex = _compile(pattern)
    return any(isinstance(leaf, str) and regex.search(leaf) for leaf in iter_leaves(node))


def grep_tree(node: Any, pattern: Pattern) -> dict[Any, Any]:
    """Collect the string leaves of a tree that match a pattern.

    The result keeps the shape of the matched paths: mapping keys stay keys
    and list positions become integer keys. Branches without matches are
    left out.

    Args:
        node: Root of the tree (a mapping or list).
        pattern: Regular expression, compiled or as a string.

    Returns:
        Nested dict of matches, empty when nothing matched.
    """
    regex = _compile(pattern)
    matches: dict[Any, Any] = {}

    for key, child in _children(node):
        if isinstance(child, Mapping | list | tuple):
            sub_matches = grep_tree(child, regex)
            if sub_matches:
                matches[key] = sub_matches
        elif isinstance(child, str) and regex.search(child):
            matches[key] = child

    return matches
