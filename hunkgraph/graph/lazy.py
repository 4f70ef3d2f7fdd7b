"""On-demand graph layout for long histories.

Contains:
- LazyGraphLayout: Lays out rows only as far as a caller needs them
"""

import logging
from typing import Optional, Sequence

from hunkgraph.graph.layout import ConnectionTracker, build_row
from hunkgraph.graph.models import Commit, CommitGraphEntry

logger = logging.getLogger(__name__)


class LazyGraphLayout:
    """Incremental layout over a commit list.

    Row N depends on the connection state left by rows 0..N-1, so rows are
    always computed in order and the tracker remembers where it stopped.
    Entries are identical to those of compute_entries for the same prefix.
    """

    def __init__(self, commits: Sequence[Commit] = ()) -> None:
        self._commits: list[Commit] = list(commits)
        self._tracker = ConnectionTracker()
        self._entries: list[CommitGraphEntry] = []
        self._by_hash: dict[str, CommitGraphEntry] = {}
        self._max_columns = 1

    @property
    def processed_count(self) -> int:
        return len(self._entries)

    @property
    def max_columns(self) -> int:
        """Widest row seen so far (at least 1)."""
        return self._max_columns

    def reset(self, commits: Sequence[Commit]) -> None:
        """Discard all state and start over with a new commit list."""
        self._commits = list(commits)
        self._tracker = ConnectionTracker()
        self._entries = []
        self._by_hash = {}
        self._max_columns = 1

    def update_commits(self, commits: Sequence[Commit]) -> None:
        """Replace the commit list with an extended one, keeping computed rows.

        Only valid when the already processed prefix is unchanged, e.g. when
        more commits have been appended while streaming the log.
        """
        self._commits = list(commits)

    def ensure_processed(self, through: int) -> None:
        """Compute entries up to and including row index `through`."""
        target = min(through, len(self._commits) - 1)
        if target < len(self._entries):
            return

        for index in range(len(self._entries), target + 1):
            commit = self._commits[index]
            entry = build_row(commit, self._tracker.advance(commit))
            self._entries.append(entry)
            self._by_hash[commit.hash] = entry
            self._max_columns = max(self._max_columns, entry.width)

        logger.debug("Processed graph rows through %d", target)

    def entry_at(self, index: int) -> Optional[CommitGraphEntry]:
        """Entry for a row index, or None if not yet processed."""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def entry_for_hash(self, commit_hash: str) -> Optional[CommitGraphEntry]:
        """Entry for a commit hash, or None if not yet processed."""
        return self._by_hash.get(commit_hash)
