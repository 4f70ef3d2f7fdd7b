"""Unified diff parser for hunkgraph.

Contains functions for parsing unified diff output:
- parse_diff: Parse the diff of a single file into a ParsedDiff
- parse_diffs: Split multi-file diff output and parse each file
- parse_hunk_header: Extract start/count values from an @@ line
- _parse_hunk_lines: Parse the body of one hunk
"""

import logging
import re
from dataclasses import replace

from hunkgraph.diff.models import HunkLine, LineKind, ParsedDiff, ParsedHunk

logger = logging.getLogger(__name__)


# Format: @@ -old_start[,old_count] +new_start[,new_count] @@ optional context
_HUNK_HEADER_RE = re.compile(r"@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")

_HEADER_PREFIXES = (
    "diff --git",
    "index ",
    "--- ",
    "+++ ",
    "old mode",
    "new mode",
    "new file",
    "deleted file",
)


def parse_hunk_header(header: str) -> tuple[int, int, int, int]:
    """Parse an @@ hunk header.

    Args:
        header: The @@ line.

    Returns:
        Tuple of (old_start, old_count, new_start, new_count). Missing counts
        default to 1; an unrecognized header yields (1, 0, 1, 0).
    """
    match = _HUNK_HEADER_RE.search(header)
    if not match:
        return 1, 0, 1, 0

    old_start = int(match.group(1))
    old_count = int(match.group(2)) if match.group(2) else 1
    new_start = int(match.group(3))
    new_count = int(match.group(4)) if match.group(4) else 1
    return old_start, old_count, new_start, new_count


def parse_diff(raw_diff: str) -> ParsedDiff:
    """Parse the unified diff of a single file.

    Never raises: malformed input degrades to fewer (or no) hunks.

    Args:
        raw_diff: Raw output of `git diff -- <file>` or similar.

    Returns:
        ParsedDiff with the file header and all hunks.
    """
    lines = raw_diff.split("\n")
    header_lines: list[str] = []
    is_new_file = False
    is_deleted_file = False

    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith("@@") or not line.startswith(_HEADER_PREFIXES):
            break
        if line.startswith("new file"):
            is_new_file = True
        elif line.startswith("deleted file"):
            is_deleted_file = True
        header_lines.append(line)
        i += 1

    hunks: list[ParsedHunk] = []
    while i < len(lines):
        if not lines[i].startswith("@@"):
            i += 1
            continue

        header = lines[i]
        old_start, old_count, new_start, new_count = parse_hunk_header(header)
        hunk_lines, i = _parse_hunk_lines(lines, i + 1, old_start, new_start)
        hunks.append(
            ParsedHunk(
                raw_header=header,
                old_start=old_start,
                old_count=old_count,
                new_start=new_start,
                new_count=new_count,
                lines=hunk_lines,
            )
        )

    logger.debug("Parsed %d hunks", len(hunks))
    return ParsedDiff(
        file_header="\n".join(header_lines),
        hunks=hunks,
        is_new_file=is_new_file,
        is_deleted_file=is_deleted_file,
    )


def _parse_hunk_lines(
    lines: list[str], start: int, old_start: int, new_start: int
) -> tuple[list[HunkLine], int]:
    """Parse hunk body lines until the next hunk or file header.

    Args:
        lines: All lines of the diff
        start: Index of the first line after the @@ header
        old_start: First old-side line number
        new_start: First new-side line number

    Returns:
        Tuple of (hunk lines, index of the first line not consumed)
    """
    hunk_lines: list[HunkLine] = []
    old_num = old_start
    new_num = new_start

    i = start
    while i < len(lines):
        line = lines[i]
        if line.startswith("@@") or line.startswith("diff --git"):
            break

        line_id = len(hunk_lines)
        if line.startswith("+") and not line.startswith("+++"):
            hunk_lines.append(
                HunkLine(
                    id=line_id,
                    kind=LineKind.ADDITION,
                    raw_text=line,
                    content=line[1:],
                    new_line_num=new_num,
                )
            )
            new_num += 1
        elif line.startswith("-") and not line.startswith("---"):
            hunk_lines.append(
                HunkLine(
                    id=line_id,
                    kind=LineKind.DELETION,
                    raw_text=line,
                    content=line[1:],
                    old_line_num=old_num,
                )
            )
            old_num += 1
        elif line.startswith(" ") or (line and not line.startswith("\\")):
            # Lenient: any other non-empty line counts as context
            hunk_lines.append(
                HunkLine(
                    id=line_id,
                    kind=LineKind.CONTEXT,
                    raw_text=line,
                    content=line[1:] if line.startswith(" ") else line,
                    old_line_num=old_num,
                    new_line_num=new_num,
                )
            )
            old_num += 1
            new_num += 1
        elif line.startswith("\\ No newline"):
            # Not a line of its own; remembered so patches can reproduce it
            if hunk_lines:
                hunk_lines[-1] = replace(hunk_lines[-1], no_newline=True)
        else:
            if line or i != len(lines) - 1:
                logger.debug("Line %d ends hunk early: %r", i, line)
            break
        i += 1

    return hunk_lines, i


def parse_diffs(diff_output: str) -> list[ParsedDiff]:
    """Parse multi-file diff output, one ParsedDiff per file.

    Args:
        diff_output: Raw output of `git diff` covering any number of files.

    Returns:
        List of ParsedDiff objects in file order.
    """
    if not diff_output.strip():
        return []

    # Plain `diff -u` output has no per-file git headers
    if not re.search(r"^diff --git ", diff_output, flags=re.MULTILINE):
        diff = parse_diff(diff_output)
        return [diff] if diff.hunks else []

    # Each file starts with 'diff --git a/... b/...'
    blocks = re.split(r"(?=^diff --git )", diff_output, flags=re.MULTILINE)
    return [parse_diff(block) for block in blocks if block.startswith("diff --git")]
