"""Commit graph layout for hunkgraph.

This package turns an ordered commit history into per-row lane geometry:
- models: Commit, Connection, HistoryLine, CommitGraphEntry, uncommitted_commit
- layout: ConnectionTracker, build_row, compute_entries
- lazy: LazyGraphLayout
- log: LOG_FORMAT, parse_commit_log
"""

# Models
from hunkgraph.graph.models import (
    UNCOMMITTED_HASH,
    Commit,
    CommitGraphEntry,
    Connection,
    HistoryLine,
    uncommitted_commit,
)

# Layout
from hunkgraph.graph.layout import (
    ConnectionTracker,
    build_row,
    compute_entries,
)

# Lazy layout
from hunkgraph.graph.lazy import (
    LazyGraphLayout,
)

# Log reader
from hunkgraph.graph.log import (
    LOG_FORMAT,
    parse_commit_log,
)


__all__ = [
    # Models
    "UNCOMMITTED_HASH",
    "Commit",
    "Connection",
    "HistoryLine",
    "CommitGraphEntry",
    "uncommitted_commit",
    # Layout
    "ConnectionTracker",
    "build_row",
    "compute_entries",
    # Lazy
    "LazyGraphLayout",
    # Log
    "LOG_FORMAT",
    "parse_commit_log",
]
