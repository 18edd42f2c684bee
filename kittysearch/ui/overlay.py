"""The interactive search loop tying input, search and kitty together."""

from __future__ import annotations

import asyncio

from kittysearch.kitty.client import KittyClient, KittyError
from kittysearch.search.engine import SearchEngine, SearchResult
from kittysearch.ui.input import InputAction, InputHandler, KeyEvent, KeyEventKind
from kittysearch.ui.screen import ResizeEvent, Screen

_POLL_TIMEOUT = 0.4


class SearchUI:
    """Reads keys, searches kitty's buffer as the query changes and jumps on Enter."""

    def __init__(self, kitty_client: KittyClient, search_engine: SearchEngine, screen: Screen) -> None:
        self._client = kitty_client
        self._engine = search_engine
        self._screen = screen
        self._input = InputHandler()
        self._results: list[SearchResult] = []
        self._current = 0
        self._dirty = True

    def set_initial_query(self, query: str) -> None:
        self._input.set_query(query)
        self._dirty = True

    async def run(self) -> None:
        """Run until the user selects a match or quits."""
        try:
            if self._input.query:
                await self._recompute_matches()

            while True:
                if self._dirty:
                    self._screen.draw_panel(
                        self._input.query, self._current + 1, len(self._results)
                    )
                    self._dirty = False

                event = await asyncio.to_thread(self._screen.poll_event, _POLL_TIMEOUT)
                if isinstance(event, ResizeEvent):
                    self._dirty = True
                elif isinstance(event, KeyEvent):
                    action = await self._handle_key(event)
                    if action is InputAction.EXIT:
                        break
                    if action is InputAction.SELECT:
                        if self._current < len(self._results):
                            await self._client.jump_to_line(
                                self._results[self._current].line_number
                            )
                        break
        finally:
            await self._remove_marker()

    async def _handle_key(self, key: KeyEvent) -> InputAction | None:
        if key.kind is not KeyEventKind.PRESS:
            return None

        action = self._input.handle_key_event(key)
        if action is InputAction.QUERY_CHANGED:
            await self._recompute_matches()
            self._dirty = True
        elif action is InputAction.NAVIGATE_UP:
            if self._current > 0:
                self._current -= 1
                self._dirty = True
        elif action is InputAction.NAVIGATE_DOWN:
            if self._current + 1 < len(self._results):
                self._current += 1
                self._dirty = True
        return action

    async def _recompute_matches(self) -> None:
        await self._remove_marker()

        query = self._input.query
        if not query:
            self._results = []
            self._current = 0
            return

        content = await self._client.get_buffer_content()
        self._results = self._engine.search_text(content, query)
        self._current = 0

        if self._results:
            await self._client.create_text_marker(query)

    async def _remove_marker(self) -> None:
        try:
            await self._client.remove_marker()
        except KittyError:
            pass