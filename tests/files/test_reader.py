"""Tests for throttled file reads."""

import asyncio

import pytest

from filematch.files import ThrottledReader


def make_slow_read(started, delay=0.01):
    """Build a fake read that records start order and tracks concurrency."""
    state = {"active": 0, "max_active": 0}

    async def slow_read(path, encoding):
        started.append(path)
        state["active"] += 1
        state["max_active"] = max(state["max_active"], state["active"])
        try:
            await asyncio.sleep(delay)
            return f"content of {path}"
        finally:
            state["active"] -= 1

    return slow_read, state


class TestThrottledReader:
    """Tests for ThrottledReader.read()."""

    def test_reads_file_content(self, tmp_path):
        """Test reading a real file returns its decoded text."""
        file_path = tmp_path / "page.html"
        file_path.write_text("<p>héllo</p>", encoding="utf-8")
        reader = ThrottledReader()

        content = asyncio.run(reader.read(file_path))

        assert content == "<p>héllo</p>"

    def test_replaces_undecodable_bytes(self, tmp_path):
        """Test that invalid UTF-8 does not fail the read."""
        file_path = tmp_path / "binary.dat"
        file_path.write_bytes(b"abc\xffdef")
        reader = ThrottledReader()

        content = asyncio.run(reader.read(file_path))

        assert content == "abc�def"

    def test_keeps_line_endings(self, tmp_path):
        """Test that CRLF and lone CR are returned exactly as stored."""
        file_path = tmp_path / "win.txt"
        file_path.write_bytes(b"a\r\nb\rc\n")
        reader = ThrottledReader()

        content = asyncio.run(reader.read(file_path))

        assert content == "a\r\nb\rc\n"

    def test_reusable_across_event_loops(self):
        """Test that one reader works in successive asyncio.run calls."""
        started = []
        slow_read, state = make_slow_read(started)
        reader = ThrottledReader(limit=1, read=slow_read)

        async def run():
            return await asyncio.gather(*(reader.read(i) for i in range(5)))

        first = asyncio.run(run())
        second = asyncio.run(run())

        assert first == second
        assert state["max_active"] == 1
        assert reader.total == 10

    def test_never_exceeds_limit(self):
        """Test that no more than limit reads are in flight at once."""
        started = []
        slow_read, state = make_slow_read(started)
        reader = ThrottledReader(limit=3, read=slow_read)

        async def run():
            return await asyncio.gather(*(reader.read(i) for i in range(20)))

        results = asyncio.run(run())

        assert len(results) == 20
        assert state["max_active"] == 3
        assert reader.peak == 3
        assert reader.total == 20
        assert reader.in_flight == 0

    def test_queued_reads_run_in_submission_order(self):
        """Test that reads waiting for a slot are serviced first-in first-out."""
        started = []
        slow_read, _ = make_slow_read(started, delay=0)
        reader = ThrottledReader(limit=1, read=slow_read)

        async def run():
            await asyncio.gather(*(reader.read(i) for i in range(10)))

        asyncio.run(run())

        assert started == list(range(10))

    def test_propagates_read_errors(self, tmp_path):
        """Test that a missing file raises the underlying OSError."""
        reader = ThrottledReader()

        with pytest.raises(FileNotFoundError):
            asyncio.run(reader.read(tmp_path / "missing.txt"))

    def test_reading_directory_fails(self, tmp_path):
        """Test that reading a directory raises rather than returning text."""
        reader = ThrottledReader()

        with pytest.raises(OSError):
            asyncio.run(reader.read(tmp_path))

    def test_releases_slot_after_failure(self):
        """Test that a failed read frees its slot for the next request."""
        calls = []

        async def flaky_read(path, encoding):
            calls.append(path)
            if path == "bad":
                raise PermissionError(path)
            return "ok"

        reader = ThrottledReader(limit=1, read=flaky_read)

        async def run():
            with pytest.raises(PermissionError):
                await reader.read("bad")
            return await reader.read("good")

        assert asyncio.run(run()) == "ok"
        assert calls == ["bad", "good"]
        assert reader.in_flight == 0

    def test_rejects_non_positive_limit(self):
        """Test that a limit below one is refused."""
        with pytest.raises(ValueError, match="at least 1"):
            ThrottledReader(limit=0)
