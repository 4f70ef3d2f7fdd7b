"""Data models for the hunkgraph diff module.

Contains:
- LineKind: Kind of a line inside a hunk
- HunkLine: A single context/addition/deletion line
- ParsedHunk: One @@ hunk with its lines
- ParsedDiff: Diff of a single file (header + hunks)
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


_DIFF_GIT_RE = re.compile(r"^diff --git a/(.*) b/(.*)$", re.MULTILINE)
_NEW_FILE_LINE_RE = re.compile(r"^\+\+\+ (?:b/)?(\S+)", re.MULTILINE)

# Marker git writes after a last line that lacks a newline
NO_NEWLINE_MARKER = "\\ No newline at end of file"


class LineKind(str, Enum):
    """Kind of a hunk line."""

    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"

    @property
    def marker(self) -> str:
        """Unified diff prefix character for this kind."""
        return {LineKind.CONTEXT: " ", LineKind.ADDITION: "+", LineKind.DELETION: "-"}[self]


@dataclass(frozen=True)
class HunkLine:
    """A single line of a hunk."""

    id: int  # 0-based, unique within the hunk
    kind: LineKind
    raw_text: str  # Original line including the prefix character
    content: str  # Line with the prefix stripped
    old_line_num: Optional[int] = None  # Set for context and deletion
    new_line_num: Optional[int] = None  # Set for context and addition
    no_newline: bool = False  # Last line of its side, followed by the no-newline marker

    @property
    def is_change(self) -> bool:
        return self.kind is not LineKind.CONTEXT


@dataclass(frozen=True)
class ParsedHunk:
    """A single hunk of a file diff."""

    raw_header: str  # The @@ ... @@ line
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: list[HunkLine] = field(default_factory=list)

    @property
    def display_range(self) -> str:
        """Human readable line range, new side first."""
        if self.new_count > 0:
            return f"lines {self.new_start}-{self.new_start + self.new_count - 1}"
        return f"lines {self.old_start}-{self.old_start + self.old_count - 1}"

    @property
    def changed_line_ids(self) -> set[int]:
        """Ids of every addition and deletion line."""
        return {line.id for line in self.lines if line.is_change}


@dataclass(frozen=True)
class ParsedDiff:
    """Parsed diff for a single file."""

    file_header: str  # Header lines from 'diff --git' up to the first @@
    hunks: list[ParsedHunk] = field(default_factory=list)
    is_new_file: bool = False
    is_deleted_file: bool = False

    @property
    def file_path(self) -> Optional[str]:
        """New-side path from the 'diff --git' line, else from the '+++' line."""
        match = _DIFF_GIT_RE.search(self.file_header)
        if match:
            return match.group(2)
        match = _NEW_FILE_LINE_RE.search(self.file_header)
        if match and match.group(1) != "/dev/null":
            return match.group(1)
        return None
