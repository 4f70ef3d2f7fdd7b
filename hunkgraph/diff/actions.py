"""Patch actions and their git apply flags.

Contains:
- PatchAction: stage / unstage / discard
- git_apply_args: Argument vector for applying a patch with a given action
"""

from enum import Enum


class PatchAction(str, Enum):
    """What applying a patch is meant to do."""

    STAGE = "stage"  # working tree -> index
    UNSTAGE = "unstage"  # index -> HEAD
    DISCARD = "discard"  # remove from working tree

    @property
    def cached(self) -> bool:
        return self in (PatchAction.STAGE, PatchAction.UNSTAGE)

    @property
    def reverse(self) -> bool:
        return self in (PatchAction.UNSTAGE, PatchAction.DISCARD)


def git_apply_args(action: PatchAction) -> list[str]:
    """Build the git arguments that apply a patch read from stdin.

    Args:
        action: The action the patch is applied for.

    Returns:
        Arguments to pass to git (without the leading "git").
    """
    args = ["apply", "--unidiff-zero", "--whitespace=nowarn"]
    if action.cached:
        args.append("--cached")
    if action.reverse:
        args.append("--reverse")
    args.append("-")
    return args
