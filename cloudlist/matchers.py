"""Matcher checking that groups of substrings appear together on one line."""

from __future__ import annotations

from typing import Any, Iterable

from .ui import decolorize


class SubstringMatcher:
    """Matches text where each group of substrings shares a single line."""

    def __init__(self, expected: Iterable[Iterable[str]]) -> None:
        self.expected = [list(group) for group in expected]
        self.failed_at_index = 0

    def match(self, actual: Any) -> bool:
        if not isinstance(actual, str):
            raise TypeError(
                "ContainSubstrings matcher expects a string, "
                f"but it's actually a {type(actual).__name__}"
            )
        lines = [decolorize(line) for line in actual.split("\n")]
        for index, group in enumerate(self.expected):
            if not any(all(part in line for part in group) for line in lines):
                self.failed_at_index = index
                return False
        return True

    def _failed_group(self) -> str:
        if not self.expected:
            return "[]"
        return "[" + " ".join(self.expected[self.failed_at_index]) + "]"

    def failure_message(self, actual: Any) -> str:
        return f'expected to find "{self._failed_group()}" in actual:\n"{actual}"\n'

    def negated_failure_message(self, actual: Any) -> str:
        return f'expected to not find "{self._failed_group()}" in actual:\n"{actual}"\n'


def contain_substrings(*args: Iterable[str] | str) -> SubstringMatcher:
    """Build a matcher from groups of substrings; a bare string is its own group."""
    return SubstringMatcher([arg] if isinstance(arg, str) else arg for arg in args)