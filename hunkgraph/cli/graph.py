"""CLI command for laying out a commit graph."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer

from hunkgraph.cli.utils import configure_logging, load_config_or_exit, read_input
from hunkgraph.graph import compute_entries, parse_commit_log, uncommitted_commit


def graph_command(
    log_file: Optional[Path] = typer.Argument(
        None,
        help="File with `git log --format='%H %P'` output (default: stdin)",
    ),
    uncommitted: bool = typer.Option(
        False,
        "--uncommitted",
        "-u",
        help="Prepend a working-directory row parented on the first commit",
    ),
    palette_size: Optional[int] = typer.Option(
        None,
        "--palette-size",
        min=1,
        help="Override the configured palette size",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print lane layout for each commit as one JSON object per line."""
    config = load_config_or_exit()
    configure_logging(config.log_level, verbose)
    if palette_size is not None:
        config = config.model_copy(update={"palette_size": palette_size})

    commits = parse_commit_log(read_input(log_file))
    if uncommitted:
        head = commits[0].hash if commits else None
        commits.insert(0, uncommitted_commit(head))

    entries = compute_entries(commits)
    for commit in commits:
        entry = entries[commit.hash]
        record = {
            "hash": commit.hash,
            "dot_column": entry.dot_column,
            "dot_color": entry.dot_color_index,
            "palette_slot": config.palette_slot(entry.dot_color_index),
            "is_uncommitted": entry.is_uncommitted,
            "width": entry.width,
            "lines": [asdict(line) for line in entry.lines],
        }
        typer.echo(json.dumps(record))
