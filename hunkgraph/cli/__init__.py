"""CLI entry point for hunkgraph.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from hunkgraph.cli.config import config_app
from hunkgraph.cli.diff import diff_command, patch_command
from hunkgraph.cli.graph import graph_command

# Main application
app = typer.Typer(
    name="hunkgraph",
    help="hunkgraph: commit graph layout and partial patch builder",
    add_completion=False,
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("graph")(graph_command)
app.command("diff")(diff_command)
app.command("patch")(patch_command)


__all__ = [
    "app",
    "config_app",
    "graph_command",
    "diff_command",
    "patch_command",
]
