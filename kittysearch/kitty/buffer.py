"""A bounded buffer of terminal lines."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class TerminalBuffer:
    """Holds the most recent terminal lines, dropping the oldest first."""

    def __init__(self, max_lines: int) -> None:
        self.max_lines = max_lines
        self._lines: deque[str] = deque()
        self._position = 0

    def add_line(self, line: str) -> None:
        """Append a line, evicting the oldest one when full."""
        if len(self._lines) >= self.max_lines and self._lines:
            self._lines.popleft()
        self._lines.append(line)

    def add_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.add_line(line)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def text(self) -> str:
        """All lines joined with newlines."""
        return "\n".join(self._lines)

    def line(self, index: int) -> str | None:
        """The line at index, or None when out of range."""
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def clear(self) -> None:
        self._lines.clear()
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = max(0, min(value, len(self._lines)))

    def context_around(self, line_number: int, context_lines: int) -> list[tuple[int, str]]:
        """Lines within context_lines of line_number, with their indices."""
        start = max(0, line_number - context_lines)
        end = min(line_number + context_lines + 1, len(self._lines))
        return [(i, self._lines[i]) for i in range(start, end)]

    def search(self, pattern: str, case_sensitive: bool) -> list[tuple[int, str]]:
        """Indices and text of lines containing pattern as a substring."""
        if case_sensitive:
            return [(i, line) for i, line in enumerate(self._lines) if pattern in line]
        needle = pattern.lower()
        return [(i, line) for i, line in enumerate(self._lines) if needle in line.lower()]