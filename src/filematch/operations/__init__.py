"""High-level operations for filematch."""

from filematch.operations.scan import run_scan
from filematch.operations.scan import scan
from filematch.operations.scan import scan_sync
from filematch.operations.write import format_matches
from filematch.operations.write import write_matches

__all__ = [
    "format_matches",
    "run_scan",
    "scan",
    "scan_sync",
    "write_matches",
]
