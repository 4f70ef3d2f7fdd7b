"""CLI commands for inspecting diffs and building partial patches."""

from pathlib import Path
from typing import Optional

import typer

from hunkgraph.cli.utils import configure_logging, load_config_or_exit, read_input
from hunkgraph.diff import (
    ParsedDiff,
    PatchAction,
    SelectionError,
    git_apply_args,
    parse_diffs,
    parse_line_selection,
    patch_for_hunk,
    patch_for_lines,
)


def _format_num(num: Optional[int]) -> str:
    return str(num) if num is not None else ""


def diff_command(
    diff_file: Optional[Path] = typer.Argument(
        None,
        help="File with unified diff output (default: stdin)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """List files, hunks and line ids of a diff."""
    config = load_config_or_exit()
    configure_logging(config.log_level, verbose)

    diffs = parse_diffs(read_input(diff_file))
    if not diffs:
        typer.echo("No file diffs found.")
        return

    for diff in diffs:
        label = diff.file_path or "(unknown file)"
        if diff.is_new_file:
            label += " (new file)"
        elif diff.is_deleted_file:
            label += " (deleted file)"
        typer.echo(f"File: {label}")

        for hunk_index, hunk in enumerate(diff.hunks):
            typer.echo(f"  Hunk {hunk_index}: {hunk.raw_header}  [{hunk.display_range}]")
            for line in hunk.lines:
                typer.echo(
                    f"    {line.id:>4} {line.kind.marker} "
                    f"{_format_num(line.old_line_num):>5} {_format_num(line.new_line_num):>5} "
                    f"{line.content}"
                )
        typer.echo()


def _select_diff(diffs: list[ParsedDiff], file_path: Optional[str]) -> ParsedDiff:
    if file_path is None:
        if len(diffs) > 1:
            typer.echo("Error: diff covers several files, choose one with --file", err=True)
            raise typer.Exit(1)
        return diffs[0]

    for diff in diffs:
        if diff.file_path == file_path:
            return diff
    typer.echo(f"Error: no diff for file {file_path}", err=True)
    raise typer.Exit(1)


def patch_command(
    diff_file: Optional[Path] = typer.Argument(
        None,
        help="File with unified diff output (default: stdin)",
    ),
    hunk: int = typer.Option(..., "--hunk", "-H", help="Index of the hunk to patch"),
    lines: Optional[str] = typer.Option(
        None,
        "--lines",
        "-l",
        help="Line ids to include, e.g. '1,3,5-7' (default: whole hunk)",
    ),
    file_path: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="File to take the hunk from when the diff covers several files",
    ),
    action: Optional[PatchAction] = typer.Option(
        None,
        "--action",
        "-a",
        help="Build the patch for this action and print its git apply command on stderr",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print a whole-hunk or line-selected patch ready for `git apply`."""
    config = load_config_or_exit()
    configure_logging(config.log_level, verbose)

    diffs = parse_diffs(read_input(diff_file))
    if not diffs:
        typer.echo("Error: no file diffs found in input", err=True)
        raise typer.Exit(1)
    diff = _select_diff(diffs, file_path)

    if lines is None:
        patch = patch_for_hunk(diff, hunk)
    else:
        try:
            selected = parse_line_selection(lines)
        except SelectionError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
        reverse = action.reverse if action is not None else False
        patch = patch_for_lines(diff, hunk, selected, reverse=reverse)

    if not patch:
        typer.echo(f"Error: hunk {hunk} out of range ({len(diff.hunks)} hunks)", err=True)
        raise typer.Exit(1)

    typer.echo(patch, nl=False)
    if action is not None:
        typer.echo("git " + " ".join(git_apply_args(action)), err=True)
