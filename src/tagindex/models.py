"""Core tagindex data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(slots=True)
class Document:
    """A document snapshot: its path relative to the base directory and its lines."""

    path: Path
    lines: List[str]

    @property
    def tag_path(self) -> str:
        return self.path.as_posix()


@dataclass(slots=True, frozen=True)
class Anchor:
    """Named jump target pointing at a line of a document."""

    name: str
    path: str
    pattern: str
    line_number: int = 0


@dataclass(slots=True)
class IndexStats:
    documents: int = 0
    chapters: int = 0
    headings: int = 0
    grammar_rules: int = 0
    processed_files: list[Path] = field(default_factory=list)
