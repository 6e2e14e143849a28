"""Aggregate matching files across a whole directory tree."""

import asyncio
import logging
import re
import time
from pathlib import Path

from filematch.files.predicate import compile_pattern
from filematch.files.predicate import file_matches
from filematch.files.reader import DEFAULT_CONCURRENCY
from filematch.files.reader import ThrottledReader
from filematch.files.traverse import gather_all
from filematch.files.traverse import traverse_directory_tree
from filematch.models import ScanConfig
from filematch.models import ScanResult

logger = logging.getLogger(__name__)


async def scan(
    root_dir: Path | str,
    match: str | re.Pattern[str],
    extension: str | None = None,
    *,
    concurrency: int = DEFAULT_CONCURRENCY,
    reader: ThrottledReader | None = None,
) -> list[Path]:
    """Find every file under root_dir whose content matches.

    Args:
        root_dir: Directory to search recursively. A non-directory yields [].
        match: Pattern to search for in each file's content. Strings are
            compiled as regular expressions without flags.
        extension: Only test files with this suffix (e.g. ".html"). None tests
            every file.
        concurrency: Max simultaneous file reads (ignored if reader is given)
        reader: Reader to use instead of a fresh ThrottledReader

    Returns:
        Matching file paths in completion order (not sorted)

    Raises:
        PatternError: If match is an invalid pattern string
        OSError: If any stat, listing or read fails anywhere in the tree
    """
    root_dir = Path(root_dir)
    regex = compile_pattern(match)
    if reader is None:
        reader = ThrottledReader(limit=concurrency)

    matches: list[Path] = []

    async def match_directory(
        children: list[Path], subdirectories: list[Path]
    ) -> None:
        # Directories are walked by the traverser, never content tested
        directories = set(subdirectories)
        files = [child for child in children if child not in directories]
        results = await gather_all(
            *(file_matches(path, regex, extension, reader) for path in files)
        )
        matches.extend(path for path, ok in zip(files, results) if ok)

    logger.debug(
        "Scanning %s for %r (extension=%s)", root_dir, regex.pattern, extension
    )
    await traverse_directory_tree(root_dir, match_directory)
    logger.debug(
        "Scan of %s done: %d matches, %d reads",
        root_dir,
        len(matches),
        reader.total,
    )

    return matches


def scan_sync(
    root_dir: Path | str,
    match: str | re.Pattern[str],
    extension: str | None = None,
    *,
    concurrency: int = DEFAULT_CONCURRENCY,
) -> list[Path]:
    """Run scan() to completion from synchronous code."""
    return asyncio.run(scan(root_dir, match, extension, concurrency=concurrency))


def run_scan(config: ScanConfig) -> ScanResult:
    """Run a configured scan and time it.

    Args:
        config: What to scan and how

    Returns:
        ScanResult with unsorted matches and elapsed wall time
    """
    logger.debug("Running scan with %s", config.to_dict())
    started = time.monotonic()
    matches = scan_sync(
        config.root_dir,
        config.match,
        config.extension,
        concurrency=config.concurrency,
    )
    return ScanResult(
        root_dir=config.root_dir,
        matches=matches,
        elapsed_s=time.monotonic() - started,
    )
