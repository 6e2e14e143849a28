"""Custom exceptions for filematch."""


class FileMatchError(Exception):
    """Base exception for filematch."""


class PatternError(FileMatchError):
    """Match pattern could not be compiled into a regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid match pattern {pattern!r}: {reason}")
