"""Data models for the ZenHub board source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _estimate_value(data: dict[str, Any]) -> float | int | None:
    """Read the optional nested ``estimate.value`` field."""
    estimate = data.get("estimate") or {}
    value: float | int | None = estimate.get("value")
    return value


@dataclass
class PipelineReference:
    """An issue's entry in a ZenHub pipeline.

    Attributes:
        issue_number: GitHub issue number the entry points at.
        is_epic: Whether ZenHub flags the issue as an epic.
        position: Position within the pipeline.
        estimate: Story point estimate, if one is set.
    """

    issue_number: int
    is_epic: bool = False
    position: int = 0
    estimate: float | int | None = None

    @classmethod
    def from_zenhub(cls, data: dict[str, Any]) -> PipelineReference:
        return cls(
            issue_number=data["issue_number"],
            is_epic=bool(data.get("is_epic", False)),
            position=data.get("position") or 0,
            estimate=_estimate_value(data),
        )


@dataclass
class Pipeline:
    """A named lane on the board with its issue entries in display order."""

    name: str
    references: list[PipelineReference] = field(default_factory=list)
    id: str | None = None

    @classmethod
    def from_zenhub(cls, data: dict[str, Any]) -> Pipeline:
        return cls(
            name=data["name"],
            references=[PipelineReference.from_zenhub(item) for item in data.get("issues") or []],
            id=data.get("id"),
        )


@dataclass
class Board:
    """Snapshot of a repository's ZenHub board."""

    pipelines: list[Pipeline] = field(default_factory=list)

    @classmethod
    def from_zenhub(cls, data: dict[str, Any]) -> Board:
        return cls(pipelines=[Pipeline.from_zenhub(p) for p in data.get("pipelines") or []])
