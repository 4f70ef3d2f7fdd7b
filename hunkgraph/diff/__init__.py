"""Unified diff parsing and patch reconstruction for hunkgraph.

This package provides line-granular staging support with:
- models: LineKind, HunkLine, ParsedHunk, ParsedDiff
- parser: parse_diff, parse_diffs, parse_hunk_header
- patch: minimal_header, patch_for_hunk, patch_for_lines, patches_for_all_hunks
- actions: PatchAction, git_apply_args
- selection: parse_line_selection
- exceptions: SelectionError
"""

# Models
from hunkgraph.diff.models import (
    NO_NEWLINE_MARKER,
    HunkLine,
    LineKind,
    ParsedDiff,
    ParsedHunk,
)

# Parser
from hunkgraph.diff.parser import (
    parse_diff,
    parse_diffs,
    parse_hunk_header,
)

# Patch builder
from hunkgraph.diff.patch import (
    minimal_header,
    patch_for_hunk,
    patch_for_lines,
    patches_for_all_hunks,
)

# Actions
from hunkgraph.diff.actions import (
    PatchAction,
    git_apply_args,
)

# Selection
from hunkgraph.diff.exceptions import SelectionError
from hunkgraph.diff.selection import parse_line_selection


__all__ = [
    # Models
    "NO_NEWLINE_MARKER",
    "LineKind",
    "HunkLine",
    "ParsedHunk",
    "ParsedDiff",
    # Parser
    "parse_diff",
    "parse_diffs",
    "parse_hunk_header",
    # Patch
    "minimal_header",
    "patch_for_hunk",
    "patch_for_lines",
    "patches_for_all_hunks",
    # Actions
    "PatchAction",
    "git_apply_args",
    # Selection
    "SelectionError",
    "parse_line_selection",
]
