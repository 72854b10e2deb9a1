"""Tests for public directory resolution."""

from pathlib import Path
from unittest.mock import patch

import pytest

from wpscaffold.models import MissingPublicDirectoryError, ScaffoldConfig
from wpscaffold.services import PublicDirectoryResolver
from wpscaffold.services.public_dir import PUBLIC_DIR_QUESTION, normalize_public_dir


class TestNormalizePublicDir:
    """Tests for normalize_public_dir()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("public", "public"), ("/public/", "public"), (" web/ ", "web"), ("a/b/", "a/b")],
    )
    def test_strips_slashes(self, value: str, expected: str) -> None:
        """Test that surrounding slashes and whitespace are removed."""
        assert normalize_public_dir(value) == expected


class TestResolve:
    """Tests for PublicDirectoryResolver.resolve()."""

    def test_explicit_value_wins(self, tmp_path: Path) -> None:
        """Test that an explicit value beats the manifest."""
        resolver = PublicDirectoryResolver(project_root=tmp_path)
        manifest = {"extra": {"public-dir": "web"}}

        assert resolver.resolve(manifest, explicit="/htdocs/") == "htdocs"

    def test_manifest_value_used(self, tmp_path: Path) -> None:
        """Test that extra.public-dir is used when declared."""
        resolver = PublicDirectoryResolver(project_root=tmp_path)

        assert resolver.resolve({"extra": {"public-dir": "web"}}) == "web"

    def test_config_value_used(self, tmp_path: Path) -> None:
        """Test that the project config is consulted before the disk."""
        (tmp_path / "public").mkdir()
        resolver = PublicDirectoryResolver(
            project_root=tmp_path, config=ScaffoldConfig(public_dir="docroot")
        )

        assert resolver.resolve({}) == "docroot"

    def test_detects_existing_candidate(self, tmp_path: Path) -> None:
        """Test that the first existing candidate directory is used."""
        (tmp_path / "htdocs").mkdir()
        (tmp_path / "www").mkdir()
        resolver = PublicDirectoryResolver(project_root=tmp_path)

        assert resolver.detect() == "htdocs"
        assert resolver.resolve({}) == "htdocs"

    def test_files_are_not_candidates(self, tmp_path: Path) -> None:
        """Test that a file named like a candidate is ignored."""
        (tmp_path / "web").write_text("not a directory")
        resolver = PublicDirectoryResolver(project_root=tmp_path)

        assert resolver.detect() is None

    def test_falls_back_to_default(self, tmp_path: Path) -> None:
        """Test the configured fallback when nothing is found."""
        resolver = PublicDirectoryResolver(project_root=tmp_path)

        assert resolver.resolve({}) == "public"

    def test_no_fallback_raises(self, tmp_path: Path) -> None:
        """Test that a missing public dir is a hard failure without a fallback."""
        resolver = PublicDirectoryResolver(
            project_root=tmp_path, config=ScaffoldConfig(default_public_dir=None)
        )

        with pytest.raises(MissingPublicDirectoryError):
            resolver.resolve({})

    def test_prompts_when_interactive(self, tmp_path: Path) -> None:
        """Test that the user is asked, with the detected directory as default."""
        (tmp_path / "html").mkdir()
        resolver = PublicDirectoryResolver(project_root=tmp_path, interactive=True)

        with patch("wpscaffold.services.public_dir.Prompt.ask", return_value="/docroot/") as ask:
            assert resolver.resolve({}) == "docroot"

        ask.assert_called_once_with(PUBLIC_DIR_QUESTION, default="html")

    def test_prompt_skipped_when_manifest_declares(self, tmp_path: Path) -> None:
        """Test that no prompt is shown when the manifest already knows."""
        resolver = PublicDirectoryResolver(project_root=tmp_path, interactive=True)

        with patch("wpscaffold.services.public_dir.Prompt.ask") as ask:
            assert resolver.resolve({"extra": {"public-dir": "web"}}) == "web"

        ask.assert_not_called()

    def test_empty_answer_raises(self, tmp_path: Path) -> None:
        """Test that an empty answer is rejected."""
        resolver = PublicDirectoryResolver(
            project_root=tmp_path,
            config=ScaffoldConfig(default_public_dir=None),
            interactive=True,
        )

        with (
            patch("wpscaffold.services.public_dir.Prompt.ask", return_value="/"),
            pytest.raises(MissingPublicDirectoryError),
        ):
            resolver.resolve({})

    def test_result_is_cached(self, tmp_path: Path) -> None:
        """Test that later calls return the first answer."""
        resolver = PublicDirectoryResolver(project_root=tmp_path)

        assert resolver.resolve({}, explicit="web") == "web"
        assert resolver.resolve({}, explicit="public") == "web"
