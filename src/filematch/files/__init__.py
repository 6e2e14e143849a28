"""Filesystem operations for filematch."""

from filematch.files.predicate import compile_pattern
from filematch.files.predicate import extension_matches
from filematch.files.predicate import file_matches
from filematch.files.reader import DEFAULT_CONCURRENCY
from filematch.files.reader import ThrottledReader
from filematch.files.traverse import gather_all
from filematch.files.traverse import is_directory
from filematch.files.traverse import traverse_directory_tree

__all__ = [
    "DEFAULT_CONCURRENCY",
    "ThrottledReader",
    "compile_pattern",
    "extension_matches",
    "file_matches",
    "gather_all",
    "is_directory",
    "traverse_directory_tree",
]
