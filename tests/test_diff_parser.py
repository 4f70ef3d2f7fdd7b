"""Tests for hunkgraph.diff parser."""

from hunkgraph.diff import LineKind, ParsedDiff, parse_diff, parse_diffs, parse_hunk_header


class TestParseHunkHeader:
    """Tests for parse_hunk_header function."""

    def test_full_header(self):
        """Test a header with all counts and trailing context."""
        assert parse_hunk_header("@@ -10,3 +12,4 @@ def main():") == (10, 3, 12, 4)

    def test_missing_counts_default_to_one(self):
        """Test that omitted counts default to 1."""
        assert parse_hunk_header("@@ -7 +8 @@") == (7, 1, 8, 1)

    def test_zero_counts(self):
        """Test a new-file header with a zero old count."""
        assert parse_hunk_header("@@ -0,0 +1,3 @@") == (0, 0, 1, 3)

    def test_unrecognized_header(self):
        """Test that a malformed header falls back to empty ranges."""
        assert parse_hunk_header("@@ garbage @@") == (1, 0, 1, 0)


class TestParseDiff:
    """Tests for parse_diff function."""

    def test_empty_input(self):
        """Test that an empty string yields an empty ParsedDiff."""
        diff = parse_diff("")

        assert diff.hunks == []
        assert diff.file_header == ""
        assert diff.is_new_file is False

    def test_file_header(self, sample_file_diff):
        """Test that header lines are collected up to the first hunk."""
        diff = parse_diff(sample_file_diff)

        assert diff.file_header == (
            "diff --git a/src/app.py b/src/app.py\n"
            "index 1234567..89abcde 100644\n"
            "--- a/src/app.py\n"
            "+++ b/src/app.py"
        )
        assert diff.file_path == "src/app.py"
        assert diff.is_new_file is False

    def test_hunk_fields(self, sample_file_diff):
        """Test the parsed hunk header values."""
        hunk = parse_diff(sample_file_diff).hunks[0]

        assert hunk.raw_header == "@@ -10,3 +10,4 @@ def main():"
        assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (10, 3, 10, 4)

    def test_line_kinds_and_numbers(self, sample_file_diff):
        """Test line classification, ids and line numbering."""
        lines = parse_diff(sample_file_diff).hunks[0].lines

        assert [(l.id, l.kind, l.content) for l in lines] == [
            (0, LineKind.CONTEXT, "a"),
            (1, LineKind.DELETION, "b"),
            (2, LineKind.ADDITION, "c"),
            (3, LineKind.ADDITION, "d"),
            (4, LineKind.CONTEXT, "e"),
        ]
        assert [(l.old_line_num, l.new_line_num) for l in lines] == [
            (10, 10),
            (11, None),
            (None, 11),
            (None, 12),
            (12, 13),
        ]
        assert lines[1].raw_text == "-b"

    def test_counts_match_line_kinds(self, sample_file_diff):
        """Test that header counts agree with the lines on each side."""
        hunk = parse_diff(sample_file_diff).hunks[0]

        old_side = [l for l in hunk.lines if l.kind is not LineKind.ADDITION]
        new_side = [l for l in hunk.lines if l.kind is not LineKind.DELETION]
        assert len(old_side) == hunk.old_count
        assert len(new_side) == hunk.new_count

    def test_numbering_from_hunk_start(self):
        """Test that numbering starts at the header's start lines."""
        diff = parse_diff("@@ -5,2 +5,3 @@\n ctx\n+added\n more\n")
        lines = diff.hunks[0].lines

        assert (lines[0].old_line_num, lines[0].new_line_num) == (5, 5)
        assert (lines[1].old_line_num, lines[1].new_line_num) == (None, 6)
        assert (lines[2].old_line_num, lines[2].new_line_num) == (6, 7)

    def test_new_file_flag(self):
        """Test detecting a new file."""
        diff = parse_diff(
            "diff --git a/n.txt b/n.txt\n"
            "new file mode 100644\n"
            "index 0000000..e69de29\n"
            "--- /dev/null\n"
            "+++ b/n.txt\n"
            "@@ -0,0 +1 @@\n"
            "+hello\n"
        )

        assert diff.is_new_file is True
        assert diff.hunks[0].lines[0].new_line_num == 1

    def test_deleted_file_keeps_full_header(self):
        """Test that a deleted-file header keeps its ---/+++ lines."""
        diff = parse_diff(
            "diff --git a/old.txt b/old.txt\n"
            "deleted file mode 100644\n"
            "index e69de29..0000000\n"
            "--- a/old.txt\n"
            "+++ /dev/null\n"
            "@@ -1 +0,0 @@\n"
            "-bye\n"
        )

        assert diff.is_deleted_file is True
        assert diff.file_header.endswith("+++ /dev/null")

    def test_multiple_hunks_restart_ids(self):
        """Test that line ids start at 0 in every hunk."""
        diff = parse_diff(
            "@@ -1,2 +1,2 @@\n-x\n+y\n z\n"
            "@@ -10,1 +10,2 @@\n w\n+v\n"
        )

        assert len(diff.hunks) == 2
        assert [l.id for l in diff.hunks[1].lines] == [0, 1]
        assert diff.hunks[1].lines[1].new_line_num == 11

    def test_no_newline_marker_is_skipped(self):
        """Test that '\\ No newline at end of file' is not a line."""
        diff = parse_diff(
            "@@ -1 +1 @@\n-old\n\\ No newline at end of file\n+new\n\\ No newline at end of file\n"
        )
        lines = diff.hunks[0].lines

        assert [(l.id, l.kind) for l in lines] == [(0, LineKind.DELETION), (1, LineKind.ADDITION)]
        assert lines[1].new_line_num == 1

    def test_no_newline_marker_flags_previous_line(self):
        """Test that the line before a no-newline marker is flagged."""
        diff = parse_diff("@@ -1,2 +1,2 @@\n a\n-b\n\\ No newline at end of file\n+c\n")
        lines = diff.hunks[0].lines

        assert [l.no_newline for l in lines] == [False, True, False]

    def test_line_without_prefix_is_context(self):
        """Test that an unprefixed non-empty line is treated as context."""
        lines = parse_diff("@@ -1,2 +1,2 @@\n first\nsecond\n").hunks[0].lines

        assert lines[1].kind is LineKind.CONTEXT
        assert lines[1].content == "second"
        assert lines[1].raw_text == "second"

    def test_empty_line_ends_hunk(self):
        """Test that an empty line inside a hunk ends it."""
        diff = parse_diff("@@ -1,3 +1,3 @@\n a\n\n b\n")
        assert [l.content for l in diff.hunks[0].lines] == ["a"]

    def test_lines_before_first_hunk_are_skipped(self):
        """Test that unrecognized lines after the header are skipped until a hunk."""
        diff = parse_diff("diff --git a/x b/x\nsimilarity index 90%\n@@ -1 +1 @@\n-a\n+b\n")

        assert diff.file_header == "diff --git a/x b/x"
        assert len(diff.hunks) == 1

    def test_file_path_absent(self):
        """Test file_path without a diff --git line."""
        assert ParsedDiff(file_header="--- a/x\n+++ b/x").file_path is None


class TestParsedHunkHelpers:
    """Tests for ParsedHunk convenience properties."""

    def test_display_range_uses_new_side(self, sample_file_diff):
        """Test display range for a hunk with new lines."""
        assert parse_diff(sample_file_diff).hunks[0].display_range == "lines 10-13"

    def test_display_range_falls_back_to_old_side(self):
        """Test display range for a pure deletion hunk."""
        hunk = parse_diff("@@ -3,2 +2,0 @@\n-x\n-y\n").hunks[0]
        assert hunk.display_range == "lines 3-4"

    def test_changed_line_ids(self, sample_file_diff):
        """Test ids of additions and deletions."""
        assert parse_diff(sample_file_diff).hunks[0].changed_line_ids == {1, 2, 3}


class TestParseDiffs:
    """Tests for parse_diffs function."""

    def test_splits_files(self, sample_multi_file_diff):
        """Test parsing a diff with multiple files."""
        diffs = parse_diffs(sample_multi_file_diff)

        assert [d.file_path for d in diffs] == ["src/main.py", "tests/test_main.py"]
        assert len(diffs[0].hunks) == 2
        assert len(diffs[1].hunks) == 1
        assert diffs[1].is_new_file is True

    def test_hunks_stay_with_their_file(self, sample_multi_file_diff):
        """Test that the second file's hunk is not attached to the first."""
        diffs = parse_diffs(sample_multi_file_diff)

        assert diffs[0].hunks[1].new_start == 22
        assert diffs[1].hunks[0].lines[0].content == "import pytest"

    def test_empty_input(self):
        """Test that blank input yields no diffs."""
        assert parse_diffs("") == []
        assert parse_diffs("\n\n") == []

    def test_plain_unified_diff(self):
        """Test that `diff -u` output without git headers is one file diff."""
        diffs = parse_diffs("--- a/f.txt\n+++ b/f.txt\n@@ -1 +1 @@\n-a\n+b\n")

        assert len(diffs) == 1
        assert diffs[0].file_path == "f.txt"
        assert [l.content for l in diffs[0].hunks[0].lines] == ["a", "b"]

    def test_text_without_hunks(self):
        """Test that input with neither git headers nor hunks yields no diffs."""
        assert parse_diffs("just some text\n") == []
