"""Text helpers for line splitting and tag search patterns."""

from __future__ import annotations

from typing import List


def split_lines(text: str) -> List[str]:
    """Split on newlines without a trailing empty entry for a final newline."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def escape_search_pattern(line: str) -> str:
    """Wrap a line as a ``/^.../`` tag address, escaping every ``/``."""
    return "/^" + line.replace("/", "\\/") + "/"
