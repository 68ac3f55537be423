"""Joins ZenHub pipeline entries onto GitHub issues."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from zenhub_export.logging import get_logger

if TYPE_CHECKING:
    from zenhub_export.github.models import Issue
    from zenhub_export.zenhub.models import Pipeline

logger = get_logger("exporter")

WAITING_PIPELINE = "Waiting"
LOW_PRIORITY = "Low"
DEFAULT_PRIORITY = "Medium"

_PIPELINE_PREFIX = re.compile(r"^.*[\\/]")


def bare_pipeline_name(name: str) -> str:
    """Strip any grouping prefix, e.g. "Team/Backlog" -> "Backlog"."""
    return _PIPELINE_PREFIX.sub("", name)


def priority_for(pipeline_name: str) -> str:
    """Jira priority for issues in the given bare pipeline."""
    return LOW_PRIORITY if pipeline_name == WAITING_PIPELINE else DEFAULT_PRIORITY


def reconcile(pipeline: Pipeline, issue_index: dict[int, Issue]) -> list[Issue]:
    """Match a pipeline's entries to fetched issues, in pipeline order.

    Board data (epic flag, position, estimate) is applied to every matched
    issue. Entries without a matching issue are dropped; the board may
    point at issues from other repositories or stale numbers.

    Args:
        pipeline: Pipeline whose entries are joined.
        issue_index: Issues of the repository keyed by issue number.

    Returns:
        Matched issues in the pipeline's display order.
    """
    issues = []
    for reference in pipeline.references:
        issue = issue_index.get(reference.issue_number)
        if issue is None:
            logger.debug(
                "Pipeline %s: no issue #%d in fetched set, skipping",
                pipeline.name,
                reference.issue_number,
            )
            continue
        issue.apply_board_data(reference)
        issues.append(issue)
    return issues
