"""Concurrency-limited file content reads."""

import asyncio
from collections.abc import Awaitable
from collections.abc import Callable
from pathlib import Path

DEFAULT_CONCURRENCY = 200
DEFAULT_ENCODING = "utf-8"

ReadFunc = Callable[[Path, str], Awaitable[str]]


def _decode_file(path: Path, encoding: str) -> str:
    # Decode bytes directly so line endings reach the pattern untranslated
    return path.read_bytes().decode(encoding, errors="replace")


async def read_text(path: Path, encoding: str) -> str:
    """Read a whole file as text without blocking the event loop.

    Undecodable bytes are replaced rather than raising. Line endings are
    kept exactly as stored.
    """
    return await asyncio.to_thread(_decode_file, path, encoding)


class ThrottledReader:
    """Read file contents with at most ``limit`` reads in flight.

    Requests beyond the limit wait on a semaphore, which wakes waiters in the
    order they arrived, so queued reads are serviced first-in first-out as
    slots free up. Errors from the underlying read propagate to the caller
    unchanged and are never retried.
    """

    def __init__(
        self,
        limit: int = DEFAULT_CONCURRENCY,
        encoding: str = DEFAULT_ENCODING,
        read: ReadFunc | None = None,
    ) -> None:
        if limit < 1:
            raise ValueError(f"Read concurrency must be at least 1, got {limit}")
        self.limit = limit
        self.encoding = encoding
        self._read = read or read_text
        self._semaphore: asyncio.Semaphore | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self.in_flight = 0
        self.peak = 0
        self.total = 0

    def _get_semaphore(self) -> asyncio.Semaphore:
        # A semaphore belongs to one event loop; start fresh on a new one
        loop = asyncio.get_running_loop()
        if self._semaphore is None or self._loop is not loop:
            self._semaphore = asyncio.Semaphore(self.limit)
            self._loop = loop
        return self._semaphore

    async def read(self, path: Path) -> str:
        """Read the full text content of path.

        Args:
            path: File to read

        Returns:
            File content decoded with the reader's encoding

        Raises:
            OSError: If the file cannot be read (missing, directory, permissions)
        """
        async with self._get_semaphore():
            self.in_flight += 1
            self.total += 1
            self.peak = max(self.peak, self.in_flight)
            try:
                return await self._read(path, self.encoding)
            finally:
                self.in_flight -= 1
