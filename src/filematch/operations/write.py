"""Persist match lists as JSON."""

import json
from collections.abc import Iterable
from pathlib import Path


def format_matches(matches: Iterable[Path | str]) -> str:
    """Render matches as a sorted, 2-space indented JSON array of strings."""
    return json.dumps(sorted(str(path) for path in matches), indent=2)


def write_matches(matches: Iterable[Path | str], path: Path) -> Path:
    """Write the sorted match list to a JSON file atomically.

    Args:
        matches: Matching file paths, in any order
        path: Output file location

    Returns:
        Absolute path of the written file
    """
    path = path.resolve()

    # Create parent directories if needed
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write atomically (write to temp file, then rename)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(format_matches(matches))
    temp_path.replace(path)
    return path
