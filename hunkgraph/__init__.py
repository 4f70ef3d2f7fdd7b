"""Commit graph layout and line-granular patch building for Git clients."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("hunkgraph")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
