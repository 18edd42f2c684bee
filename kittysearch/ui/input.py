"""Editing of the search query from key events."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class KeyCode(enum.Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESC = "esc"
    TAB = "tab"
    OTHER = "other"


class KeyEventKind(enum.Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A key event; char holds the character for KeyCode.CHAR."""

    code: KeyCode
    char: str | None = None
    kind: KeyEventKind = KeyEventKind.PRESS

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and (self.char is None or len(self.char) != 1):
            raise ValueError("a CHAR key event needs exactly one character")


class InputAction(enum.Enum):
    NONE = "none"
    QUERY_CHANGED = "query_changed"
    NAVIGATE_UP = "navigate_up"
    NAVIGATE_DOWN = "navigate_down"
    SELECT = "select"
    EXIT = "exit"


class InputHandler:
    """The query being typed and the cursor within it."""

    def __init__(self) -> None:
        self.query = ""
        self.cursor_pos = 0

    def handle_key_event(self, key: KeyEvent) -> InputAction:
        """Apply a key press to the query and report what it means."""
        if key.kind is not KeyEventKind.PRESS:
            return InputAction.NONE

        code = key.code
        if code is KeyCode.CHAR:
            self.query = self.query[:self.cursor_pos] + key.char + self.query[self.cursor_pos:]
            self.cursor_pos += 1
            return InputAction.QUERY_CHANGED
        if code is KeyCode.BACKSPACE:
            if self.cursor_pos == 0:
                return InputAction.NONE
            self.cursor_pos -= 1
            self.query = self.query[:self.cursor_pos] + self.query[self.cursor_pos + 1:]
            return InputAction.QUERY_CHANGED
        if code is KeyCode.DELETE:
            if self.cursor_pos >= len(self.query):
                return InputAction.NONE
            self.query = self.query[:self.cursor_pos] + self.query[self.cursor_pos + 1:]
            return InputAction.QUERY_CHANGED
        if code is KeyCode.LEFT:
            self.cursor_pos = max(0, self.cursor_pos - 1)
            return InputAction.NONE
        if code is KeyCode.RIGHT:
            self.cursor_pos = min(len(self.query), self.cursor_pos + 1)
            return InputAction.NONE
        if code is KeyCode.HOME:
            self.cursor_pos = 0
            return InputAction.NONE
        if code is KeyCode.END:
            self.cursor_pos = len(self.query)
            return InputAction.NONE
        if code is KeyCode.UP:
            return InputAction.NAVIGATE_UP
        if code is KeyCode.DOWN:
            return InputAction.NAVIGATE_DOWN
        if code is KeyCode.ENTER:
            return InputAction.SELECT
        if code is KeyCode.ESC:
            if not self.query:
                return InputAction.EXIT
            self.clear()
            return InputAction.QUERY_CHANGED
        return InputAction.NONE

    def set_query(self, query: str) -> None:
        """Replace the query and put the cursor at its end."""
        self.query = query
        self.cursor_pos = len(query)

    def clear(self) -> None:
        self.query = ""
        self.cursor_pos = 0