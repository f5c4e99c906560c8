"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def doc_tree(tmp_path: Path) -> Path:
    """A small documentation tree shaped like the book sources."""
    base = tmp_path / "TSPL.docc"
    (base / "LanguageGuide").mkdir(parents=True)
    (base / "ReferenceManual").mkdir()

    (base / "LanguageGuide" / "TheBasics.md").write_text(
        "# The Basics\n"
        "\n"
        "Work with common kinds of data.\n"
        "\n"
        "## Constants and Variables\n",
        encoding="utf-8",
    )
    (base / "ReferenceManual" / "Statements.md").write_text(
        "# Statements\n"
        "\n"
        "> *statement* → *expression* **`;`**_?_\n"
        "*loop-statement* → *for-in-statement*\n",
        encoding="utf-8",
    )
    (base / "ReferenceManual" / "SummaryOfTheGrammar.md").write_text(
        "# Summary of the Grammar\n"
        "> *statement* → *expression*\n",
        encoding="utf-8",
    )
    return base
