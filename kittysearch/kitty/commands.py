"""Descriptions of kitty remote-control commands and of kitty's window listing."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any


class ScrollDirection(enum.Enum):
    PREVIOUS = "prev"
    NEXT = "next"


@dataclass(frozen=True)
class KittyCommand:
    """A remote-control command with its arguments and optional payload."""

    cmd: str
    args: tuple[str, ...] = ()
    payload: str | None = None

    def with_args(self, args) -> KittyCommand:
        return replace(self, args=tuple(args))

    def with_payload(self, payload: str) -> KittyCommand:
        return replace(self, payload=payload)

    @classmethod
    def get_text(cls) -> KittyCommand:
        return cls("get-text")

    @classmethod
    def scroll_to_line(cls, line: int) -> KittyCommand:
        return cls("scroll-to-line").with_args([str(line)])

    @classmethod
    def list_windows(cls) -> KittyCommand:
        return cls("ls")

    @classmethod
    def send_text(cls, text: str) -> KittyCommand:
        return cls("send-text").with_payload(text)

    @classmethod
    def set_window_title(cls, title: str) -> KittyCommand:
        return cls("set-window-title").with_args([title])

    @classmethod
    def resize_window(cls, width: int, height: int) -> KittyCommand:
        return cls("resize-window").with_args([f"--width={width}", f"--height={height}"])

    @classmethod
    def focus_window(cls, window_id: str) -> KittyCommand:
        return cls("focus-window").with_args([f"--match=id:{window_id}"])

    @classmethod
    def get_colors(cls) -> KittyCommand:
        return cls("get-colors")

    @classmethod
    def set_colors(cls, colors: Mapping[str, str]) -> KittyCommand:
        return cls("set-colors").with_args(f"{key}={value}" for key, value in colors.items())

    @classmethod
    def create_marker(cls, text: str) -> KittyCommand:
        return cls("create-marker").with_args([text])

    @classmethod
    def remove_marker(cls) -> KittyCommand:
        return cls("remove-marker")

    @classmethod
    def scroll_to_prompt(cls, direction: ScrollDirection) -> KittyCommand:
        return cls("scroll-to-prompt").with_args([ScrollDirection(direction).value])

    def to_command_line(self) -> list[str]:
        """The argv that runs this command through kitty."""
        return ["kitty", "@", self.cmd, *self.args]


def _field(data: Mapping[str, Any], key: str, kind: type) -> Any:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None
    if kind is int and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"field {key!r} must be an integer")
    if kind is not int and not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


@dataclass(frozen=True)
class WindowInfo:
    id: int
    title: str
    pid: int
    cwd: str
    cmdline: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WindowInfo:
        return cls(
            id=_field(data, "id", int),
            title=_field(data, "title", str),
            pid=_field(data, "pid", int),
            cwd=_field(data, "cwd", str),
            cmdline=[str(part) for part in _field(data, "cmdline", list)],
            env={str(k): str(v) for k, v in _field(data, "env", dict).items()},
        )


@dataclass(frozen=True)
class TabInfo:
    id: int
    title: str
    layout: str
    windows: list[WindowInfo]
    active_window: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TabInfo:
        return cls(
            id=_field(data, "id", int),
            title=_field(data, "title", str),
            layout=_field(data, "layout", str),
            windows=[WindowInfo.from_dict(w) for w in _field(data, "windows", list)],
            active_window=_field(data, "active_window", int),
        )


@dataclass(frozen=True)
class OSWindowInfo:
    id: int
    tabs: list[TabInfo]
    active_tab: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OSWindowInfo:
        return cls(
            id=_field(data, "id", int),
            tabs=[TabInfo.from_dict(t) for t in _field(data, "tabs", list)],
            active_tab=_field(data, "active_tab", int),
        )