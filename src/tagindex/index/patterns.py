"""Line patterns recognised by the tag indexer.

Each pattern is checked on its own against a single line. :meth:`LinePatterns.classify`
applies them in priority order: chapter heading, then any other heading, then a
grammar production.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional

from tagindex.errors import PatternError

CHAPTER_PATTERN = r"^# (.*)"
HEADING_PATTERN = r"^#+ "
GRAMMAR_PATTERN = r"^(?:> )?\*([a-z-]+)\* → "

LineKind = Literal["chapter", "heading", "grammar"]


@dataclass(slots=True, frozen=True)
class LineMatch:
    kind: LineKind
    value: str


def compile_pattern(source: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        raise PatternError(source, str(exc)) from exc


class LinePatterns:
    """Compiled chapter, heading and grammar-production patterns."""

    def __init__(
        self,
        *,
        chapter: str = CHAPTER_PATTERN,
        heading: str = HEADING_PATTERN,
        grammar: str = GRAMMAR_PATTERN,
    ) -> None:
        self.chapter = compile_pattern(chapter)
        self.heading = compile_pattern(heading)
        self.grammar = compile_pattern(grammar)

    def match_chapter(self, line: str) -> Optional[str]:
        """Return the chapter title of a ``# Title`` line."""
        match = self.chapter.match(line)
        if match is None:
            return None
        return match.group(1) if match.groups() else match.group(0)

    def match_heading(self, line: str) -> bool:
        return self.heading.match(line) is not None

    def match_grammar_rule(self, line: str) -> Optional[str]:
        """Return the syntactic category defined by a grammar production line."""
        match = self.grammar.match(line)
        if match is None:
            return None
        return match.group(1) if match.groups() else match.group(0)

    def classify(self, line: str) -> Optional[LineMatch]:
        title = self.match_chapter(line)
        if title is not None:
            return LineMatch("chapter", title)
        if self.match_heading(line):
            return LineMatch("heading", line.lstrip("#").strip())
        rule = self.match_grammar_rule(line)
        if rule is not None:
            return LineMatch("grammar", rule)
        return None
