"""Formatting of search results for display."""

from __future__ import annotations

from dataclasses import dataclass

from kittysearch.search.engine import SearchResult


@dataclass
class UIRenderer:
    show_line_numbers: bool = True
    max_results_displayed: int = 100

    def format_result_line(self, result: SearchResult, is_selected: bool, max_width: int) -> str:
        """Render a result, truncated with an ellipsis to fit max_width."""
        prefix = f"{result.line_number:4}: " if self.show_line_numbers else ""
        available = max(0, max_width - len(prefix))
        if len(result.line) > available:
            content = result.line[:max(0, available - 1)] + "…"
        else:
            content = result.line
        return prefix + content