"""Tests for hunkgraph.graph.lazy module."""

from hunkgraph.graph import Commit, LazyGraphLayout, compute_entries


class TestLazyGraphLayout:
    """Tests for LazyGraphLayout class."""

    def test_nothing_processed_initially(self, merge_commits):
        """Test that rows are only computed on request."""
        layout = LazyGraphLayout(merge_commits)

        assert layout.processed_count == 0
        assert layout.entry_at(0) is None
        assert layout.entry_for_hash("M") is None

    def test_processes_through_index(self, merge_commits):
        """Test that ensure_processed computes rows up to the given index."""
        layout = LazyGraphLayout(merge_commits)
        layout.ensure_processed(1)

        assert layout.processed_count == 2
        assert layout.entry_for_hash("A") is not None
        assert layout.entry_at(2) is None

    def test_clamps_to_commit_count(self, merge_commits):
        """Test that an index past the end processes every commit."""
        layout = LazyGraphLayout(merge_commits)
        layout.ensure_processed(100)

        assert layout.processed_count == len(merge_commits)

    def test_matches_batch_layout(self, merge_commits):
        """Test that incremental results equal compute_entries."""
        layout = LazyGraphLayout(merge_commits)
        layout.ensure_processed(1)
        layout.ensure_processed(3)

        expected = compute_entries(merge_commits)
        for index, commit in enumerate(merge_commits):
            assert layout.entry_at(index) == expected[commit.hash]

    def test_max_columns_tracks_widest_row(self, merge_commits):
        """Test that max_columns reflects the widest processed row."""
        layout = LazyGraphLayout(merge_commits)
        assert layout.max_columns == 1

        layout.ensure_processed(3)
        assert layout.max_columns == 2

    def test_update_commits_keeps_processed_rows(self, linear_commits):
        """Test that appending commits continues from the processed prefix."""
        layout = LazyGraphLayout(linear_commits[:2])
        layout.ensure_processed(5)
        first_row = layout.entry_at(0)

        layout.update_commits(linear_commits)
        layout.ensure_processed(2)

        assert layout.processed_count == 3
        assert layout.entry_at(0) is first_row
        assert layout.entry_at(2) == compute_entries(linear_commits)["C"]

    def test_reset_discards_state(self, merge_commits):
        """Test that reset starts a fresh layout."""
        layout = LazyGraphLayout(merge_commits)
        layout.ensure_processed(3)

        layout.reset([Commit("X")])

        assert layout.processed_count == 0
        assert layout.max_columns == 1
        layout.ensure_processed(0)
        assert layout.entry_for_hash("X").dot_column == 0
        assert layout.entry_for_hash("M") is None

    def test_empty_commit_list(self):
        """Test that an empty layout ignores processing requests."""
        layout = LazyGraphLayout()
        layout.ensure_processed(3)

        assert layout.processed_count == 0
