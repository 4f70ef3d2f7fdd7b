"""Line selection parsing.

Contains:
- parse_line_selection: Parse "0,2,5-7" style selections into line ids
"""

from hunkgraph.diff.exceptions import SelectionError


def parse_line_selection(selection: str) -> set[int]:
    """Parse a comma separated list of line ids and inclusive ranges.

    Args:
        selection: Selection such as "0,2,5-7". Whitespace is ignored.

    Returns:
        Set of selected line ids (empty for an empty string).

    Raises:
        SelectionError: If an entry is not a non-negative id or a valid range.
    """
    selected: set[int] = set()
    for part in selection.split(","):
        part = part.strip()
        if not part:
            continue

        if "-" in part:
            start_text, _, end_text = part.partition("-")
            if not (start_text.strip().isdecimal() and end_text.strip().isdecimal()):
                raise SelectionError(f"Invalid line range: {part!r}")
            start, end = int(start_text), int(end_text)
            if start > end:
                raise SelectionError(f"Line range is reversed: {part!r}")
            selected.update(range(start, end + 1))
        else:
            if not part.isdecimal():
                raise SelectionError(f"Invalid line id: {part!r}")
            selected.add(int(part))
    return selected
