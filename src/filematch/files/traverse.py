"""Concurrent recursive directory traversal."""

import asyncio
import inspect
import logging
import os
import stat
from collections.abc import Awaitable
from collections.abc import Callable
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DirectoryCallback = Callable[[list[Path], list[Path]], Awaitable[Any] | None]


async def is_directory(path: Path) -> bool:
    """Check whether path is a directory, following symlinks.

    Raises:
        OSError: If path cannot be stat'ed (vanished, broken symlink, ...)
    """
    st = await asyncio.to_thread(path.stat)
    return stat.S_ISDIR(st.st_mode)


async def list_children(directory: Path) -> list[Path]:
    """List the immediate children of a directory, in listing order."""
    names = await asyncio.to_thread(os.listdir, directory)
    return [directory / name for name in names]


async def gather_all(*aws: Awaitable[Any]) -> list[Any]:
    """Wait for every awaitable, then raise the first failure if any.

    Unlike a plain gather, a failure does not surface until all siblings have
    finished, so no work is left running in the background.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


async def _invoke(
    callback: DirectoryCallback, children: list[Path], subdirectories: list[Path]
) -> Any:
    result = callback(children, subdirectories)
    if inspect.isawaitable(result):
        return await result
    return result


async def _walk_directory(directory: Path, on_directory: DirectoryCallback) -> None:
    children = await list_children(directory)
    # Each child is stat'ed exactly once, here
    flags = await gather_all(*(is_directory(child) for child in children))
    subdirectories = [child for child, is_dir in zip(children, flags) if is_dir]
    logger.debug(
        "Visiting %s (%d entries, %d directories)",
        directory,
        len(children),
        len(subdirectories),
    )

    await gather_all(
        _invoke(on_directory, children, subdirectories),
        *(_walk_directory(subdir, on_directory) for subdir in subdirectories),
    )


async def traverse_directory_tree(root: Path, on_directory: DirectoryCallback) -> None:
    """Walk root and every directory below it, calling on_directory for each.

    on_directory receives the full list of a directory's immediate children
    (files and sub-directories mixed) and, second, the subset of those
    children that are directories. It may return an awaitable, in which case
    traversal only completes once that awaitable has. Sibling subtrees are
    walked concurrently.

    Args:
        root: Path to start from. If it is not a directory, nothing happens.
        on_directory: Called once per directory with its child paths and
            sub-directory paths

    Raises:
        OSError: If any stat or listing fails anywhere in the tree
        Exception: Whatever the first failing callback raised
    """
    if not await is_directory(root):
        return

    await _walk_directory(root, on_directory)
