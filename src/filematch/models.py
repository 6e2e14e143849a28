"""Data models for filematch."""

import math
import re
from dataclasses import dataclass
from pathlib import Path

from filematch.files.reader import DEFAULT_CONCURRENCY

DEFAULT_OUTPUT_NAME = "file_list.json"


@dataclass
class ScanConfig:
    """Everything needed to run one scan and persist its matches."""

    root_dir: Path  # Where to begin recursively searching
    match: str | re.Pattern[str]  # Literal regex source or compiled pattern
    extension: str | None = None  # Only test files with this suffix (e.g. ".html")
    write_file_path: Path | None = None  # Where to write the JSON list, None to skip
    concurrency: int = DEFAULT_CONCURRENCY  # Max simultaneous file reads

    @property
    def pattern_source(self) -> str:
        """Get the pattern as its regex source text."""
        if isinstance(self.match, re.Pattern):
            return self.match.pattern
        return self.match

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "root_dir": str(self.root_dir),
            "match": self.pattern_source,
            "extension": self.extension,
            "write_file_path": (
                str(self.write_file_path) if self.write_file_path else None
            ),
            "concurrency": self.concurrency,
        }


@dataclass
class ScanResult:
    """Outcome of a completed scan."""

    root_dir: Path
    matches: list[Path]  # Unordered, in completion order
    elapsed_s: float

    @property
    def seconds(self) -> int:
        """Elapsed time rounded up to whole seconds."""
        return math.ceil(self.elapsed_s)

    def sorted_paths(self) -> list[str]:
        """Get matches as strings sorted lexicographically ascending."""
        return sorted(str(path) for path in self.matches)
