"""Recursively find files whose contents match a pattern."""

from filematch.operations import scan
from filematch.operations import scan_sync
from filematch.operations import write_matches

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "scan",
    "scan_sync",
    "write_matches",
]
