"""Line-oriented text search with a small result cache."""

from __future__ import annotations

import re
import threading
from collections import OrderedDict
from collections.abc import Iterator
from dataclasses import dataclass

_CACHE_CAPACITY = 100
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+\Z")


class SearchError(Exception):
    """Raised when a search pattern cannot be compiled."""


@dataclass(frozen=True)
class SearchResult:
    """One match: the 1-based line it sits on and its span inside that line."""

    line_number: int
    line: str
    match_start: int
    match_end: int


def _iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (1-based number, line including its terminator) pairs."""
    for number, match in enumerate(_LINE_RE.finditer(text), start=1):
        yield number, match.group()


class SearchEngine:
    """Searches text line by line, remembering recent results."""

    def __init__(self, max_buffer_size: int, case_sensitive: bool, regex_enabled: bool) -> None:
        self.max_buffer_size = max_buffer_size
        self.case_sensitive = case_sensitive
        self.regex_enabled = regex_enabled
        self._cache: OrderedDict[tuple, list[SearchResult]] = OrderedDict()
        self._lock = threading.Lock()

    def _compile(self, pattern: str) -> re.Pattern[str]:
        source = pattern if self.regex_enabled else re.escape(pattern)
        flags = 0 if self.case_sensitive else re.IGNORECASE
        try:
            return re.compile(source, flags)
        except re.error as exc:
            raise SearchError(f"invalid pattern {pattern!r}: {exc}") from exc

    def search_text(self, text: str, pattern: str) -> list[SearchResult]:
        """Return every match of pattern in text, in order of appearance."""
        if not pattern:
            return []

        key = (pattern, self.case_sensitive, self.regex_enabled, len(text.encode("utf-8")))
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                return list(cached)

        compiled = self._compile(pattern)
        results: list[SearchResult] = []

        # Text holding a NUL byte is treated as binary and not searched.
        if "\x00" not in text:
            for number, line in _iter_lines(text):
                results.extend(self._matches_in_line(compiled, number, line))

        with self._lock:
            self._cache[key] = list(results)
            self._cache.move_to_end(key)
            while len(self._cache) > _CACHE_CAPACITY:
                self._cache.popitem(last=False)

        return results

    @staticmethod
    def _matches_in_line(
        compiled: re.Pattern[str], number: int, line: str
    ) -> Iterator[SearchResult]:
        pos = 0
        while (found := compiled.search(line, pos)) is not None:
            yield SearchResult(number, line, found.start(), found.end())
            pos = found.end() if found.end() > found.start() else found.end() + 1
            if pos >= len(line):
                break

    def search_buffer(self, buffer: bytes, pattern: str) -> list[SearchResult]:
        """Search raw bytes, decoding them as UTF-8 with replacement."""
        return self.search_text(bytes(buffer).decode("utf-8", errors="replace"), pattern)

    def clear_cache(self) -> None:
        """Forget all cached results."""
        with self._lock:
            self._cache.clear()

    def cache_size(self) -> int:
        """Number of cached result sets."""
        with self._lock:
            return len(self._cache)