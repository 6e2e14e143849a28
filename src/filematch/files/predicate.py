"""Decide whether a single file matches."""

import re
from pathlib import Path

from filematch.exceptions import PatternError
from filematch.files.reader import ThrottledReader


def compile_pattern(match: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a literal pattern string with no flags.

    Args:
        match: Regex source text, or an already compiled pattern

    Returns:
        Compiled pattern (the same object if one was passed in)

    Raises:
        PatternError: If match is not a valid regular expression
    """
    if isinstance(match, re.Pattern):
        return match
    try:
        return re.compile(match)
    except re.error as e:
        raise PatternError(match, str(e)) from e


def extension_matches(path: Path, extension: str | None) -> bool:
    """Check path's suffix against an optional extension filter."""
    if not extension:
        return True
    return path.suffix == extension


async def file_matches(
    path: Path,
    match: str | re.Pattern[str],
    extension: str | None,
    reader: ThrottledReader,
) -> bool:
    """Test whether a file qualifies as a match.

    The extension is checked first so that files with the wrong suffix are
    rejected without ever being opened.

    Args:
        path: File to test
        match: Pattern to search for anywhere in the file's content
        extension: Required suffix (e.g. ".html"), or None to test every file
        reader: Throttled reader used for the content read

    Returns:
        True if the extension matches and the pattern is found in the content

    Raises:
        PatternError: If match is an invalid pattern string
        OSError: If the file cannot be read
    """
    if not extension_matches(path, extension):
        return False

    regex = compile_pattern(match)
    content = await reader.read(path)
    return regex.search(content) is not None
