"""Exceptions raised while building a tag index."""

from __future__ import annotations

from pathlib import Path


class TagIndexError(RuntimeError):
    """Base class for indexing failures. Every subclass aborts the run."""


class TraversalError(TagIndexError):
    """The base directory is missing or is not a directory."""

    def __init__(self, base_dir: Path, reason: str) -> None:
        super().__init__(f"Cannot index {base_dir}: {reason}")
        self.base_dir = base_dir


class ReadError(TagIndexError):
    """A qualifying document could not be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class PatternError(TagIndexError):
    """A line pattern failed to compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
