"""The small search panel drawn in the bottom-right corner of the terminal."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass

from blessed import Terminal
from blessed.keyboard import Keystroke

from kittysearch.ui.input import KeyCode, KeyEvent

_PANEL_WIDTH = 30
_PANEL_HEIGHT = 4

_NAMED_KEYS = {
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_DELETE": KeyCode.DELETE,
    "KEY_LEFT": KeyCode.LEFT,
    "KEY_RIGHT": KeyCode.RIGHT,
    "KEY_HOME": KeyCode.HOME,
    "KEY_END": KeyCode.END,
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_ESCAPE": KeyCode.ESC,
    "KEY_TAB": KeyCode.TAB,
}

_CONTROL_CHARS = {
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
    "\x1b": KeyCode.ESC,
    "\t": KeyCode.TAB,
}


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    cols: int
    rows: int


def _keystroke_to_event(keystroke: Keystroke) -> KeyEvent | None:
    if not keystroke:
        return None
    if keystroke.is_sequence:
        return KeyEvent(_NAMED_KEYS.get(keystroke.name, KeyCode.OTHER))
    text = str(keystroke)
    if text in _CONTROL_CHARS:
        return KeyEvent(_CONTROL_CHARS[text])
    if len(text) == 1 and text.isprintable():
        return KeyEvent(KeyCode.CHAR, text)
    return KeyEvent(KeyCode.OTHER)


class Screen:
    """Owns the terminal while the panel is shown: raw mode and hidden cursor."""

    def __init__(self, terminal: Terminal | None = None) -> None:
        self._term = terminal if terminal is not None else Terminal()
        self._stack = contextlib.ExitStack()
        self._stack.enter_context(self._term.raw())
        self._write(self._term.hide_cursor)
        self._size = self._current_size()
        self._closed = False

    def _current_size(self) -> tuple[int, int]:
        return self._term.width, self._term.height

    def _write(self, text: str) -> None:
        stream = self._term.stream
        stream.write(text)
        stream.flush()

    def draw_panel(self, query: str, idx: int, total: int) -> None:
        """Draw the prompt and the 'idx/total' status line."""
        term = self._term
        cols, rows = self._current_size()
        self._size = (cols, rows)
        x = max(0, cols - _PANEL_WIDTH)
        y = max(0, rows - _PANEL_HEIGHT)

        parts = [term.move_xy(x, y + row) + term.clear_eol for row in range(_PANEL_HEIGHT)]
        parts.append(term.move_xy(x, y) + "🔍 " + term.bold(query) + "▌")
        parts.append(term.move_xy(x, y + 1))
        parts.append(term.move_xy(x, y + 2) + f"{idx}/{total}  ↑↓ jump  Esc quit")
        self._write("".join(parts))

    def poll_event(self, timeout: float) -> KeyEvent | ResizeEvent | None:
        """Wait up to timeout seconds for a key press or a resize."""
        size = self._current_size()
        if size != self._size:
            self._size = size
            return ResizeEvent(*size)
        return _keystroke_to_event(self._term.inkey(timeout=timeout))

    def close(self) -> None:
        """Show the cursor again and leave raw mode."""
        if self._closed:
            return
        self._closed = True
        self._write(self._term.normal_cursor)
        self._stack.close()

    def __enter__(self) -> Screen:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()