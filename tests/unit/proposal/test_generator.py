"""Unit tests for rename proposal generation."""

import pytest

from autorename.config import Settings
from autorename.normalizer import NormalizationOptions
from autorename.proposal import ProposalGenerator, RowState
from autorename.proposal.generator import unique_paths


class TestProposalGenerator:
    """Test ProposalGenerator."""

    @pytest.fixture
    def generator(self, is_file, default_options):
        """Create a generator that never touches the file system."""
        return ProposalGenerator(default_options, is_directory=is_file, exists=lambda path: False, max_workers=1)

    def test_ready_and_unchanged(self, generator):
        """Test rows for a dirty and a clean name."""
        rows = generator.generate(["/m/my_song.mp3", "/m/clean name.mp3"])

        assert rows[0].state is RowState.READY
        assert rows[0].new_path == "/m/my song.mp3"
        assert rows[0].error is None
        assert rows[1].state is RowState.UNCHANGED
        assert rows[1].new_path == "/m/clean name.mp3"

    def test_empty_input(self, generator):
        """Test generating rows for no paths."""
        assert generator.generate([]) == []

    def test_repeated_input_loaded_once(self, generator):
        """Test that a path given twice yields a single row."""
        rows = generator.generate(["/m/a_b.mp3", "/m/c_d.mp3", "/m/./a_b.mp3", "/m/a_b.mp3"])

        assert [row.original_path for row in rows] == ["/m/a_b.mp3", "/m/c_d.mp3"]
        assert [row.state for row in rows] == [RowState.READY, RowState.READY]

    def test_unique_paths(self):
        """Test dropping repeated paths keeps the first spelling and the order."""
        assert unique_paths(["b", "a", "./b", "a/", "c"]) == ["b", "a", "c"]

    def test_case_variant_of_other_file(self, tmp_path):
        """Test that an existing file differing only by case is a conflict."""
        source = tmp_path / "hello world.mp3"
        other = tmp_path / "Hello World.mp3"
        source.write_text("a")
        other.write_text("b")
        if source.samefile(other):
            pytest.skip("case-insensitive file system")
        generator = ProposalGenerator(NormalizationOptions(start_with_upper_case=True), max_workers=1)

        row = generator.generate([str(source)])[0]

        assert row.state is RowState.CONFLICT
        assert row.error == f"Target exists: {other}"

    def test_duplicate_in_batch(self, generator):
        """Test two paths converging on one destination."""
        rows = generator.generate(["/m/a_b.mp3", "/m/a%20b.mp3"])

        assert rows[0].state is RowState.READY
        assert rows[1].state is RowState.CONFLICT
        assert rows[1].error == "Duplicate target: /m/a b.mp3"
        assert rows[1].alternative == "/m/a b (1).mp3"

    def test_duplicate_ignores_case(self, generator):
        """Test that destinations differing only in case collide."""
        rows = generator.generate(["/m/a_b.mp3", "/m/A_B.mp3"])

        assert rows[1].state is RowState.CONFLICT

    def test_unchanged_row_claims_its_path(self, generator):
        """Test that a clean name blocks a later row targeting it."""
        rows = generator.generate(["/m/a b.mp3", "/m/a_b.mp3"])

        assert rows[0].state is RowState.UNCHANGED
        assert rows[1].state is RowState.CONFLICT

    def test_existing_destination(self, is_file, default_options):
        """Test a destination that already exists on disk."""
        taken = {"/m/my song.mp3", "/m/my song (1).mp3"}
        generator = ProposalGenerator(default_options, is_directory=is_file, exists=taken.__contains__)

        row = generator.generate(["/m/my_song.mp3"])[0]

        assert row.state is RowState.CONFLICT
        assert row.error == "Target exists: /m/my song.mp3"
        assert row.alternative == "/m/my song (2).mp3"

    def test_empty_name_is_error(self, generator):
        """Test a name that normalizes to nothing."""
        row = generator.generate(["/m/___.mp3"])[0]

        assert row.state is RowState.ERROR
        assert row.error == "Empty file name"

    def test_order_kept_with_threads(self, is_file, default_options):
        """Test that threaded generation keeps input order."""
        generator = ProposalGenerator(default_options, is_directory=is_file, exists=lambda path: False, max_workers=8)
        paths = [f"/m/track_{i:03d}.mp3" for i in range(50)]

        rows = generator.generate(paths)

        assert [row.original_path for row in rows] == paths
        assert [row.new_path for row in rows] == [f"/m/track {i:03d}.mp3" for i in range(50)]

    def test_view_flags(self, is_file, default_options):
        """Test that rows inherit the display flags."""
        generator = ProposalGenerator(
            default_options, show_extension=False, show_full_path=False, is_directory=is_file, exists=lambda p: False
        )

        row = generator.generate(["/m/my_song.mp3"])[0]

        assert row.original_view == "my_song"
        assert row.new_view == "my song"

    def test_views_default_to_stems(self, generator):
        """Test that by default rows show neither extension nor directory."""
        row = generator.generate(["/m/my_song.mp3"])[0]

        assert row.show_extension is False
        assert row.show_full_path is False
        assert row.new_view == "my song"

    def test_refresh_keeps_renamed_rows(self, is_file, all_options, generator):
        """Test recomputing proposals after the options changed."""
        rows = generator.generate(["/m/01_first.mp3", "/m/02_second.mp3"])
        rows[0].mark(RowState.RENAMED)

        generator.options = all_options
        refreshed = generator.refresh(rows)

        assert refreshed[0] is rows[0]
        assert refreshed[1].new_path == "/m/Second.mp3"

    def test_from_settings(self):
        """Test building a generator from settings."""
        settings = Settings(start_with_upper_case=True, show_full_path=True, max_workers=2)

        generator = ProposalGenerator.from_settings(settings, is_directory=lambda path: False)

        assert generator.options == NormalizationOptions(start_with_upper_case=True)
        assert generator.show_full_path is True
        assert generator.show_extension is False
        assert generator.max_workers == 2
        assert generator.propose("/m/my_song.mp3") == "/m/My Song.mp3"
