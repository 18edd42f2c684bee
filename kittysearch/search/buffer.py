"""Loading and slicing of byte buffers with a size cap."""

from __future__ import annotations

import os


class BufferManager:
    """Keeps at most max_size trailing bytes of whatever it loads."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size

    def _tail(self, data: bytes) -> bytes:
        if len(data) > self.max_size:
            return data[len(data) - self.max_size:]
        return data

    def load_from_file(self, path: str | os.PathLike[str]) -> bytes:
        """Read a file, keeping only its most recent max_size bytes."""
        with open(path, "rb") as handle:
            return self._tail(handle.read())

    def load_from_string(self, content: str) -> bytes:
        """Encode text as UTF-8, keeping only the last max_size bytes."""
        return self._tail(content.encode("utf-8"))

    def chunk_buffer(self, buffer: bytes, chunk_size: int) -> list[bytes]:
        """Split a buffer into consecutive pieces of at most chunk_size bytes."""
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        data = bytes(buffer)
        return [data[start:start + chunk_size] for start in range(0, len(data), chunk_size)]