"""Shared utility functions for CLI commands."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from hunkgraph.config import ConfigError, HunkgraphConfig, load_config


def read_input(path: Optional[Path]) -> str:
    """Read command input from a file, or from stdin for None or '-'.

    Raises:
        typer.Exit: If the file can't be read.
    """
    if path is None or str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text()
    except OSError as e:
        typer.echo(f"Error: cannot read {path}: {e}", err=True)
        raise typer.Exit(1)


def load_config_or_exit() -> HunkgraphConfig:
    """Load configuration, exiting with an error message on failure."""
    try:
        return load_config()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def configure_logging(level: str, verbose: bool = False) -> None:
    """Configure logging for a CLI run.

    Args:
        level: Level name from the configuration.
        verbose: Force DEBUG output.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format="%(levelname)s:%(name)s:%(message)s",
    )
