"""Utility helpers for working with files."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, Iterator

from tagindex.errors import ReadError, TraversalError


def iter_document_paths(
    base_dir: Path, *, extension: str = ".md", excluded: Iterable[str] = ()
) -> Iterator[Path]:
    """Yield qualifying document paths under ``base_dir``, relative to it.

    Paths are sorted so repeated runs produce the same tag file. Excluded
    entries are matched against the ``/``-separated relative path.
    """
    if not base_dir.exists():
        raise TraversalError(base_dir, "directory does not exist")
    if not base_dir.is_dir():
        raise TraversalError(base_dir, "not a directory")

    skip = set(excluded)
    candidates = (
        child.relative_to(base_dir)
        for child in base_dir.rglob(f"*{extension}")
        if not child.is_dir()
    )
    for relative in sorted(candidates, key=lambda item: item.as_posix()):
        if relative.as_posix() in skip:
            continue
        yield relative


def read_text(path: Path) -> str:
    """Read a document as UTF-8, wrapping failures in :class:`ReadError`."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ReadError(path, "not valid UTF-8 text") from exc
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc


def atomic_write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` through a temporary sibling file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
