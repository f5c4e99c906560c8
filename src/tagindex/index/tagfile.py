"""POSIX ctags output."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from tagindex.models import Anchor
from tagindex.utils.files import atomic_write_text

LOGGER = logging.getLogger(__name__)


def format_tag(anchor: Anchor) -> str:
    return f"{anchor.name}\t{anchor.path}\t{anchor.pattern}\n"


def render_tags(anchors: Iterable[Anchor]) -> str:
    """Render anchors as tag records, preserving their order."""
    return "".join(format_tag(anchor) for anchor in anchors)


def write_tags(anchors: Iterable[Anchor], output_path: Path) -> int:
    """Replace ``output_path`` with the rendered tags and return the record count.

    The previous file is left untouched if writing fails.
    """
    records = [format_tag(anchor) for anchor in anchors]
    atomic_write_text(output_path, "".join(records))
    LOGGER.debug("Wrote %d tags to %s", len(records), output_path)
    return len(records)
