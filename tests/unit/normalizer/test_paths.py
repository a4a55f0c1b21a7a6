"""
Unit tests for path splitting and display helpers.
"""

import pytest

from autorename.normalizer import PathComponents, apply_visual_rules, join_path, resolve_view_path, split_path


class TestSplitPath:
    """Test split_path and join_path."""

    def test_file(self, is_file):
        """Test splitting a file path."""
        assert split_path("/music/song.mp3", is_file) == PathComponents("/music", "song", ".mp3", False)

    def test_relative(self, is_file):
        """Test a bare file name."""
        components = split_path("song.mp3", is_file)
        assert components.directory == ""
        assert components.name == "song.mp3"

    def test_directory_trailing_separator(self):
        """Test that a trailing separator is ignored."""
        seen = []

        def predicate(path):
            seen.append(path)
            return True

        components = split_path("/music/album/", predicate)

        assert components == PathComponents("/music", "album", "", True)
        assert seen == ["/music/album"]

    def test_dotfile(self, is_file):
        """Test that a leading dot is part of the stem."""
        components = split_path("/home/.bashrc", is_file)
        assert components.stem == ".bashrc"
        assert components.extension == ""

    def test_uses_filesystem_by_default(self, tmp_path):
        """Test the default directory predicate."""
        assert split_path(str(tmp_path)).is_directory is True
        assert split_path(str(tmp_path / "missing.txt")).is_directory is False

    def test_join(self, is_file):
        """Test rebuilding a path with a new stem."""
        components = split_path("/music/old.mp3", is_file)
        assert join_path(components, "new") == "/music/new.mp3"
        assert join_path(split_path("old.mp3", is_file), "new") == "new.mp3"


class TestVisualRules:
    """Test apply_visual_rules and resolve_view_path."""

    PATH = "/a/b/song.mp3"

    @pytest.mark.parametrize(
        "show_extension,show_full_path,expected",
        [
            (True, True, "/a/b/song.mp3"),
            (False, True, "/a/b/song"),
            (True, False, "song.mp3"),
            (False, False, "song"),
        ],
    )
    def test_apply(self, show_extension, show_full_path, expected):
        """Test every combination of display flags."""
        assert apply_visual_rules(self.PATH, show_extension, show_full_path) == expected

    def test_apply_none(self):
        """Test that no path gives no view."""
        assert apply_visual_rules(None, True, True) is None

    @pytest.mark.parametrize(
        "view,show_extension,show_full_path,expected",
        [
            ("/c/new.ogg", True, True, "/c/new.ogg"),
            ("/c/new", False, True, "/c/new.mp3"),
            ("new.ogg", True, False, "/a/b/new.ogg"),
            ("new", False, False, "/a/b/new.mp3"),
        ],
    )
    def test_resolve(self, view, show_extension, show_full_path, expected):
        """Test that hidden parts come back from the original path."""
        assert resolve_view_path(view, self.PATH, show_extension, show_full_path) == expected

    def test_resolve_relative(self):
        """Test resolving against a bare file name."""
        assert resolve_view_path("new", "song.mp3", False, False) == "new.mp3"
