"""Patch builder for hunkgraph.

Contains:
- minimal_header: File header without 'index' lines
- patch_for_hunk: Patch for one whole hunk
- patch_for_lines: Patch for a selection of lines within one hunk
- patches_for_all_hunks: One whole-hunk patch per hunk
"""

from typing import Iterable, Optional

from hunkgraph.diff.models import NO_NEWLINE_MARKER, LineKind, ParsedDiff, ParsedHunk


def minimal_header(diff: ParsedDiff) -> str:
    """Return the file header with all 'index' lines removed.

    Blob hashes on 'index' lines are often stale for the destination the patch
    is applied to.
    """
    lines = diff.file_header.split("\n")
    return "\n".join(line for line in lines if not line.startswith("index "))


def _get_hunk(diff: ParsedDiff, hunk_index: int) -> Optional[ParsedHunk]:
    if 0 <= hunk_index < len(diff.hunks):
        return diff.hunks[hunk_index]
    return None


def patch_for_hunk(diff: ParsedDiff, hunk_index: int) -> str:
    """Build a patch containing a single, unmodified hunk.

    Args:
        diff: Parsed file diff
        hunk_index: Index of the hunk within diff.hunks

    Returns:
        Patch text, or "" if hunk_index is out of range.
    """
    hunk = _get_hunk(diff, hunk_index)
    if hunk is None:
        return ""

    patch_lines = [minimal_header(diff), hunk.raw_header]
    for line in hunk.lines:
        patch_lines.append(line.raw_text)
        if line.no_newline:
            patch_lines.append(NO_NEWLINE_MARKER)
    # git apply requires the patch to end with a newline
    return "\n".join(patch_lines) + "\n"


def _render_body(entries: list[tuple[str, str, bool]]) -> list[str]:
    """Render (marker, content, no_newline) entries, placing no-newline markers.

    A marker is only valid after the last line of its side. A context line
    that ends just one side without a newline is split into a -/+ pair.
    """
    last_old = max((i for i, entry in enumerate(entries) if entry[0] != "+"), default=None)
    last_new = max((i for i, entry in enumerate(entries) if entry[0] != "-"), default=None)

    body: list[str] = []
    for i, (marker, content, no_newline) in enumerate(entries):
        old_eof = no_newline and i == last_old
        new_eof = no_newline and i == last_new
        if marker == " " and old_eof != new_eof:
            body.append("-" + content)
            if old_eof:
                body.append(NO_NEWLINE_MARKER)
            body.append("+" + content)
            if new_eof:
                body.append(NO_NEWLINE_MARKER)
            continue

        body.append(marker + content)
        if old_eof or new_eof:
            body.append(NO_NEWLINE_MARKER)
    return body


def patch_for_lines(
    diff: ParsedDiff, hunk_index: int, selected_ids: Iterable[int], reverse: bool = False
) -> str:
    """Build a patch applying only the selected lines of a hunk.

    Unselected deletions become context (the line stays), unselected additions
    are dropped (the line never appears). The @@ header is recomputed from the
    emitted lines; start positions are kept.

    With reverse=True the patch is meant for `git apply --reverse` (unstage,
    discard): the new side is what gets rolled back, so unselected additions
    become context and unselected deletions are dropped instead.

    Args:
        diff: Parsed file diff
        hunk_index: Index of the hunk within diff.hunks
        selected_ids: HunkLine ids to include as changes
        reverse: Build the patch for reverse application

    Returns:
        Patch text, or "" if hunk_index is out of range.
    """
    hunk = _get_hunk(diff, hunk_index)
    if hunk is None:
        return ""

    # Change kind that turns into context when left unselected
    kept_kind = LineKind.ADDITION if reverse else LineKind.DELETION

    selected = set(selected_ids)
    entries: list[tuple[str, str, bool]] = []
    old_count = 0
    new_count = 0

    for line in hunk.lines:
        is_selected = line.id in selected
        if line.kind is LineKind.CONTEXT or (line.kind is kept_kind and not is_selected):
            entries.append((" ", line.content, line.no_newline))
            old_count += 1
            new_count += 1
        elif not is_selected:
            continue
        elif line.kind is LineKind.DELETION:
            entries.append(("-", line.content, line.no_newline))
            old_count += 1
        else:
            entries.append(("+", line.content, line.no_newline))
            new_count += 1

    header = f"@@ -{hunk.old_start},{old_count} +{hunk.new_start},{new_count} @@"
    body = _render_body(entries)
    return "\n".join([minimal_header(diff), header, *body]) + "\n"


def patches_for_all_hunks(diff: ParsedDiff) -> list[str]:
    """Build one whole-hunk patch per hunk, in hunk order."""
    return [patch_for_hunk(diff, i) for i in range(len(diff.hunks))]
