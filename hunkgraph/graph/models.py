"""Data models for the hunkgraph graph module.

Contains:
- Commit: A commit as supplied by the caller (hash + parent hashes)
- Connection: A pipe in flight between a child row and its parent row
- HistoryLine: A drawable line segment within a single row
- CommitGraphEntry: Per-commit lane/line geometry
"""

from dataclasses import dataclass, field
from typing import Optional


# Hash used for the working-directory pseudo-commit
UNCOMMITTED_HASH = "__uncommitted__"


@dataclass(frozen=True)
class Commit:
    """A commit in caller-supplied display order."""

    hash: str
    parent_hashes: tuple[str, ...] = ()
    is_uncommitted: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence of parents but store an immutable tuple
        object.__setattr__(self, "parent_hashes", tuple(self.parent_hashes))

    @property
    def is_merge(self) -> bool:
        return len(self.parent_hashes) > 1

    @property
    def is_root(self) -> bool:
        return not self.parent_hashes


def uncommitted_commit(head_hash: Optional[str] = None) -> Commit:
    """Build the pseudo-commit representing working-directory state.

    Args:
        head_hash: Hash of HEAD, or None for a repository without commits.

    Returns:
        Commit with zero or one parent and is_uncommitted set.
    """
    parents = (head_hash,) if head_hash else ()
    return Commit(hash=UNCOMMITTED_HASH, parent_hashes=parents, is_uncommitted=True)


@dataclass(frozen=True)
class Connection:
    """A pipe from child_hash down to parent_hash, drawn in one color."""

    parent_hash: str
    child_hash: str
    color_index: int


@dataclass(frozen=True)
class HistoryLine:
    """A line segment within one row.

    child_index is the column at the top edge (None: starts at this row's dot),
    parent_index is the column at the bottom edge (None: ends at this row's dot).
    """

    child_index: Optional[int]
    parent_index: Optional[int]
    color_index: int


@dataclass(frozen=True)
class CommitGraphEntry:
    """Graph geometry for a single commit row."""

    dot_column: int
    dot_color_index: int
    lines: list[HistoryLine] = field(default_factory=list)
    is_uncommitted: bool = False

    @property
    def width(self) -> int:
        """Number of logical columns this row spans."""
        columns = [self.dot_column]
        for line in self.lines:
            if line.child_index is not None:
                columns.append(line.child_index)
            if line.parent_index is not None:
                columns.append(line.parent_index)
        return max(columns) + 1
