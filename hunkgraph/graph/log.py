"""Commit log text reader.

Contains:
- LOG_FORMAT: The git log format this module reads
- parse_commit_log: Parse "<hash> <parent>..." lines into Commit objects
"""

from hunkgraph.graph.models import UNCOMMITTED_HASH, Commit


# git log --format value producing one "<hash> <parent> <parent>..." line per commit
LOG_FORMAT = "%H %P"


def parse_commit_log(log_output: str) -> list[Commit]:
    """Parse commit log output into commits, keeping the input order.

    Args:
        log_output: Output of `git log --format='%H %P'` (any traversal order).

    Returns:
        List of Commit objects. Blank lines are ignored.
    """
    commits: list[Commit] = []
    for line in log_output.splitlines():
        fields = line.split()
        if not fields:
            continue
        commit_hash, parents = fields[0], fields[1:]
        commits.append(
            Commit(
                hash=commit_hash,
                parent_hashes=tuple(parents),
                is_uncommitted=commit_hash == UNCOMMITTED_HASH,
            )
        )
    return commits
