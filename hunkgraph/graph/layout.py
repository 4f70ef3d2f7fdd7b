"""Commit graph lane layout.

Contains:
- ConnectionTracker: Tracks open connections while scanning commits (pass 1)
- build_row: Turn one row's connection snapshot into drawable lines (pass 2)
- compute_entries: Lay out a whole ordered commit list
"""

import logging
from typing import Iterable, Optional

from hunkgraph.graph.models import Commit, CommitGraphEntry, Connection, HistoryLine

logger = logging.getLogger(__name__)


class ConnectionTracker:
    """Ordered set of open connections plus a monotonic color counter.

    Connections whose parent never appears in the scanned commits (truncated
    history) are never consumed and stay open until the end.
    """

    def __init__(self) -> None:
        self._connections: list[Connection] = []
        self._next_color = 0

    @property
    def open_connections(self) -> tuple[Connection, ...]:
        return tuple(self._connections)

    def _allocate_color(self) -> int:
        color = self._next_color
        self._next_color += 1
        return color

    def advance(self, commit: Commit) -> tuple[Connection, ...]:
        """Register a commit's outgoing connections and consume arriving ones.

        Args:
            commit: The next commit in display order.

        Returns:
            Snapshot of all connections in flight at this commit's row.
        """
        arriving_index: Optional[int] = None
        for i, conn in enumerate(self._connections):
            if conn.parent_hash == commit.hash:
                arriving_index = i
                break

        parents = commit.parent_hashes
        if parents:
            if arriving_index is not None:
                color = self._connections[arriving_index].color_index
            else:
                color = self._allocate_color()
            first = Connection(parent_hash=parents[0], child_hash=commit.hash, color_index=color)
            if arriving_index is not None:
                # Continuing line keeps its position
                self._connections.insert(arriving_index + 1, first)
            else:
                self._connections.append(first)

            for parent_hash in parents[1:]:
                self._connections.append(
                    Connection(
                        parent_hash=parent_hash,
                        child_hash=commit.hash,
                        color_index=self._allocate_color(),
                    )
                )

        snapshot = tuple(self._connections)
        self._connections = [c for c in self._connections if c.parent_hash != commit.hash]
        return snapshot


def build_row(commit: Commit, snapshot: tuple[Connection, ...]) -> CommitGraphEntry:
    """Build the graph entry for one row from its connection snapshot.

    Connections that share a parent are collapsed onto one column, so parallel
    pipes heading for the same ancestor are drawn as a single lane.

    Args:
        commit: The commit drawn on this row.
        snapshot: Connections in flight at this row (from ConnectionTracker).

    Returns:
        CommitGraphEntry for the commit.
    """
    parent_outlets: list[str] = []
    for conn in snapshot:
        if conn.parent_hash != commit.hash and conn.parent_hash not in parent_outlets:
            parent_outlets.append(conn.parent_hash)
    outlet_index = {parent_hash: i for i, parent_hash in enumerate(parent_outlets)}

    next_child_index = 0
    parent_lines: dict[str, tuple[int, int]] = {}
    dot_column: Optional[int] = None
    dot_color_index: Optional[int] = None
    lines: list[HistoryLine] = []

    for conn in snapshot:
        commit_is_parent = conn.parent_hash == commit.hash
        commit_is_child = conn.child_hash == commit.hash

        parent_index = None if commit_is_parent else outlet_index[conn.parent_hash]
        child_index = None if commit_is_child else next_child_index
        color_index = conn.color_index

        if dot_column is None and (commit_is_parent or commit_is_child):
            dot_column = next_child_index
            dot_color_index = color_index

        if conn.parent_hash in parent_lines:
            if not commit_is_child:
                child_index, color_index = parent_lines[conn.parent_hash]
            elif not commit_is_parent:
                next_child_index += 1
        else:
            if not commit_is_child:
                parent_lines[conn.parent_hash] = (next_child_index, color_index)
            if not commit_is_parent:
                next_child_index += 1
            elif commit.is_root:
                # No outgoing connection takes over the column of a graph root
                next_child_index += 1

        lines.append(
            HistoryLine(child_index=child_index, parent_index=parent_index, color_index=color_index)
        )

    return CommitGraphEntry(
        dot_column=dot_column or 0,
        dot_color_index=dot_color_index or 0,
        lines=lines,
        is_uncommitted=commit.is_uncommitted,
    )


def compute_entries(commits: Iterable[Commit]) -> dict[str, CommitGraphEntry]:
    """Lay out an ordered commit history.

    The order is taken as given (e.g. topological, newest first); commits are
    never re-sorted.

    Args:
        commits: Commits in display order.

    Returns:
        Dictionary mapping commit hash to its CommitGraphEntry.
    """
    commits = list(commits)
    if not commits:
        return {}

    tracker = ConnectionTracker()
    snapshots = [tracker.advance(commit) for commit in commits]

    entries: dict[str, CommitGraphEntry] = {}
    for commit, snapshot in zip(commits, snapshots):
        entries[commit.hash] = build_row(commit, snapshot)

    logger.debug(
        "Laid out %d commits, %d connections left open",
        len(commits),
        len(tracker.open_connections),
    )
    return entries
