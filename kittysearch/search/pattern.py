"""Compiling search patterns into regular expressions."""

from __future__ import annotations

import re

from kittysearch.search.engine import SearchError


class PatternMatcher:
    """Turns user patterns into compiled regular expressions."""

    def __init__(self, case_sensitive: bool, regex_enabled: bool) -> None:
        self.case_sensitive = case_sensitive
        self.regex_enabled = regex_enabled

    def compile_pattern(self, pattern: str) -> re.Pattern[str]:
        """Compile pattern, escaping it unless regex mode is on."""
        source = pattern if self.regex_enabled else re.escape(pattern)
        flags = 0 if self.case_sensitive else re.IGNORECASE
        try:
            return re.compile(source, flags)
        except re.error as exc:
            raise SearchError(f"invalid pattern {pattern!r}: {exc}") from exc

    def is_match(self, pattern: str, text: str) -> bool:
        """Whether pattern occurs anywhere in text."""
        return self.compile_pattern(pattern).search(text) is not None

    def find_matches(self, pattern: str, text: str) -> list[tuple[int, int]]:
        """Spans of all non-overlapping matches of pattern in text."""
        return [match.span() for match in self.compile_pattern(pattern).finditer(text)]