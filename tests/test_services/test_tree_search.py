"""Tests for depth-first tree search."""

import re

from wpscaffold.services import grep_tree, tree_contains
from wpscaffold.services.tree_search import iter_leaves

WPACKAGIST = re.compile(r"^https?://wpackagist\.org/?$")


class TestIterLeaves:
    """Tests for iter_leaves()."""

    def test_yields_leaves_in_document_order(self) -> None:
        """Test depth-first traversal over mixed nodes."""
        tree = {"a": [1, {"b": "two"}], "c": None}
        assert list(iter_leaves(tree)) == [1, "two", None]

    def test_scalar_root_is_a_leaf(self) -> None:
        """Test that a scalar root yields itself."""
        assert list(iter_leaves("x")) == ["x"]


class TestTreeContains:
    """Tests for tree_contains()."""

    def test_finds_match_in_list_of_objects(self) -> None:
        """Test a match inside a repository-style list."""
        tree = [{"type": "vcs", "url": "git@example.com"}, {"url": "https://wpackagist.org"}]
        assert tree_contains(tree, WPACKAGIST)

    def test_finds_deeply_nested_match(self) -> None:
        """Test that nested lists and mappings are searched."""
        tree = {"a": {"b": [[{"c": "http://wpackagist.org/"}]]}}
        assert tree_contains(tree, WPACKAGIST)

    def test_no_match(self) -> None:
        """Test a tree without matching leaves."""
        assert not tree_contains([{"url": "https://packagist.org"}], WPACKAGIST)

    def test_non_string_leaves_never_match(self) -> None:
        """Test that numbers and booleans are skipped."""
        assert not tree_contains([1, True, None, 2.5], r".*")

    def test_accepts_string_pattern(self) -> None:
        """Test that an uncompiled pattern works too."""
        assert tree_contains({"k": "value"}, r"^val")


class TestGrepTree:
    """Tests for grep_tree()."""

    def test_keeps_shape_of_matches(self) -> None:
        """Test that matches are returned under their keys and indexes."""
        tree = [{"type": "vcs", "url": "x"}, {"type": "composer", "url": "https://wpackagist.org"}]

        assert grep_tree(tree, WPACKAGIST) == {1: {"url": "https://wpackagist.org"}}

    def test_drops_branches_without_matches(self) -> None:
        """Test that empty sub-results are left out."""
        tree = {"a": {"b": "nope"}, "c": ["yes"]}

        assert grep_tree(tree, r"^yes$") == {"c": {0: "yes"}}

    def test_empty_when_nothing_matches(self) -> None:
        """Test that no matches yields an empty dict."""
        assert grep_tree({"a": ["b"]}, r"^z") == {}
