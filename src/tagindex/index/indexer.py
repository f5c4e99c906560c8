"""Tag indexing pass over a documentation tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

from tagindex.config import DEFAULT_EXCLUDED, DEFAULT_EXTENSION, DEFAULT_NAMESPACE
from tagindex.index.patterns import LinePatterns
from tagindex.models import Anchor, Document, IndexStats
from tagindex.utils.files import iter_document_paths, read_text
from tagindex.utils.text import escape_search_pattern, split_lines

LOGGER = logging.getLogger(__name__)


def load_document(base_dir: Path, relative: Path) -> Document:
    """Read a document under ``base_dir`` into a line snapshot."""
    return Document(path=relative, lines=split_lines(read_text(base_dir / relative)))


class TagIndexer:
    """Extracts navigation anchors from the documents under a base directory."""

    def __init__(
        self,
        *,
        extension: str = DEFAULT_EXTENSION,
        excluded: Iterable[str] = DEFAULT_EXCLUDED,
        namespace: str = DEFAULT_NAMESPACE,
        patterns: Optional[LinePatterns] = None,
    ) -> None:
        self.extension = extension
        self.excluded = tuple(excluded)
        self.namespace = namespace
        self.patterns = patterns if patterns is not None else LinePatterns()

    def build(self, base_dir: Path) -> Tuple[list[Anchor], IndexStats]:
        """Index every qualifying document, returning anchors and counters.

        Any error aborts the whole pass; no partial result is returned.
        """
        base_dir = Path(base_dir)
        anchors: list[Anchor] = []
        stats = IndexStats()

        paths = list(
            iter_document_paths(base_dir, extension=self.extension, excluded=self.excluded)
        )
        if not paths:
            LOGGER.warning("No %s documents found under %s", self.extension, base_dir)

        for relative in paths:
            LOGGER.info("%s", relative.as_posix())
            document = load_document(base_dir, relative)
            anchors.extend(self.index_document(document, stats))
            stats.documents += 1
            stats.processed_files.append(relative)

        return anchors, stats

    def index_document(
        self, document: Document, stats: Optional[IndexStats] = None
    ) -> list[Anchor]:
        """Scan one document in line order."""
        anchors: list[Anchor] = []
        chapter: Optional[str] = None

        for number, line in enumerate(document.lines, start=1):
            match = self.patterns.classify(line)
            if match is None:
                continue

            if match.kind == "chapter":
                chapter = match.value
                anchors.append(
                    Anchor(
                        name=self.namespace + chapter,
                        path=document.tag_path,
                        pattern=escape_search_pattern(line),
                        line_number=number,
                    )
                )
                if stats is not None:
                    stats.chapters += 1
            elif match.kind == "heading":
                # Section headings have no tag namespace yet.
                LOGGER.debug(
                    "%s:%d heading %r in chapter %r",
                    document.tag_path, number, match.value, chapter,
                )
                if stats is not None:
                    stats.headings += 1
            else:
                LOGGER.debug("%s:%d grammar rule %r", document.tag_path, number, match.value)
                if stats is not None:
                    stats.grammar_rules += 1

        return anchors


def build_index(
    base_dir: Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    excluded: Iterable[str] = DEFAULT_EXCLUDED,
    namespace: str = DEFAULT_NAMESPACE,
) -> list[Anchor]:
    """Return the anchors for every qualifying document under ``base_dir``."""
    indexer = TagIndexer(extension=extension, excluded=excluded, namespace=namespace)
    anchors, _ = indexer.build(base_dir)
    return anchors
