"""Data models for the Exporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ExportedFile:
    """A CSV file written for one repository pipeline.

    Attributes:
        repository: Repository name.
        pipeline: Bare pipeline name.
        path: Location of the written file.
        rows: Number of issue rows (header excluded).
    """

    repository: str
    pipeline: str
    path: Path
    rows: int


@dataclass
class ExportResult:
    """Outcome of a full export run."""

    files: list[ExportedFile] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return sum(f.rows for f in self.files)
