"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_BASE_DIR = Path("TSPL.docc")
DEFAULT_OUTPUT = Path("tags")
DEFAULT_EXTENSION = ".md"
# Raw grammar listing; every production line in it would match.
DEFAULT_EXCLUDED = ("ReferenceManual/SummaryOfTheGrammar.md",)
DEFAULT_NAMESPACE = "doc:"


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if path.is_absolute() or base_dir is None:
        return path
    return base_dir / path


@dataclass(slots=True)
class AppConfig:
    base_dir: Path = DEFAULT_BASE_DIR
    output_path: Path = DEFAULT_OUTPUT
    extension: str = DEFAULT_EXTENSION
    excluded: Tuple[str, ...] = DEFAULT_EXCLUDED
    namespace: str = DEFAULT_NAMESPACE

    def __post_init__(self) -> None:
        self.base_dir = Path(self.base_dir)
        self.output_path = Path(self.output_path)
        self.excluded = tuple(self.excluded)

    def resolve_base_dir(self, cwd: Path | None = None) -> Path:
        return _resolve(self.base_dir, cwd)

    def resolve_output_path(self, cwd: Path | None = None) -> Path:
        return _resolve(self.output_path, cwd)
