"""Diff-related exception classes.

Contains:
- SelectionError: Raised when a line selection string cannot be parsed
"""


class SelectionError(Exception):
    """Raised when a line selection string is malformed."""

    pass
