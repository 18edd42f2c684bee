"""Talking to a running kitty instance through its remote-control interface."""

from __future__ import annotations

import asyncio
import json
import os
import subprocess
from typing import Any

from kittysearch.kitty.commands import KittyCommand


class KittyError(Exception):
    """Raised when kitty cannot be reached or a remote command fails."""


class KittyClient:
    """Runs ``kitty @`` commands, optionally against a specific socket."""

    def __init__(self, socket_path: str | None = None) -> None:
        self.socket_path = socket_path

    @classmethod
    async def create(cls) -> KittyClient:
        """Build a client for the kitty window this process runs in."""
        if "KITTY_WINDOW_ID" not in os.environ:
            raise KittyError("Not running inside a Kitty terminal")
        return cls(None)

    async def _run(self, command: KittyCommand, action: str) -> bytes:
        argv = command.to_command_line()
        if self.socket_path is not None:
            argv += ["--to", self.socket_path]
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise KittyError(f"Failed to {action}: {exc}") from exc
        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace")
            raise KittyError(f"Failed to {action}: {message}")
        return stdout

    async def get_buffer_content(self) -> str:
        """The text currently shown in the kitty window."""
        output = await self._run(KittyCommand.get_text(), "get buffer content")
        return output.decode("utf-8", errors="replace")

    async def jump_to_line(self, line_number: int) -> None:
        """Scroll the window so that line_number is shown."""
        await self._run(KittyCommand.scroll_to_line(line_number), "jump to line")

    async def create_text_marker(self, text: str) -> None:
        """Highlight every occurrence of text in the window."""
        command = KittyCommand("create-marker").with_args(["text", "1", text])
        await self._run(command, "create marker")

    async def remove_marker(self) -> None:
        """Remove any highlighting marker from the window."""
        await self._run(KittyCommand.remove_marker(), "remove marker")

    async def get_window_info(self) -> Any:
        """kitty's JSON description of its OS windows, tabs and windows."""
        output = await self._run(KittyCommand.list_windows(), "get window info")
        try:
            return json.loads(output.decode("utf-8", errors="replace"))
        except json.JSONDecodeError as exc:
            raise KittyError(f"Failed to get window info: {exc}") from exc

    @staticmethod
    def is_available() -> bool:
        """Whether kitty's remote control answers at all."""
        try:
            completed = subprocess.run(
                ["kitty", "@", "ls"], capture_output=True, check=False
            )
        except OSError:
            return False
        return completed.returncode == 0