"""Maps reconciled issues onto Jira CSV import rows."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zenhub_export.github.models import Issue

CSV_HEADERS = [
    "Issue Type",
    "Summary",
    "Date Created",
    "Assignee",
    "Reporter",
    "Description",
    "Estimate",
    "GitHub URL",
    # Jira maps repeated "Labels" columns onto one multi-value field
    "Labels",
    "Labels",
    "Labels",
    "Priority",
]

LABEL_COLUMNS = 3


def issue_type(issue: Issue) -> str:
    """Jira issue type: a bug label wins over the epic flag."""
    if issue.is_bug:
        return "Bug"
    if issue.is_epic:
        return "Epic"
    return "New Feature"


def padded_labels(labels: list[str]) -> list[str]:
    """First three labels, bug labels blanked, always three columns.

    Spaces become underscores since Jira labels can't contain them. Bug
    labels are already expressed by the issue type column.
    """
    padded = []
    for label in labels[:LABEL_COLUMNS]:
        clean = label.replace(" ", "_")
        padded.append("" if clean.lower() == "bug" else clean)
    padded.extend([""] * (LABEL_COLUMNS - len(padded)))
    return padded


def _text(value: object) -> str:
    return "" if value is None else str(value)


def export_row(issue: Issue, priority: str) -> list[str]:
    """Build the 12-column row for an issue, matching CSV_HEADERS."""
    return [
        issue_type(issue),
        issue.title,
        issue.created_at,
        _text(issue.assignee),
        _text(issue.user),
        issue.body,
        _text(issue.estimate),
        issue.html_url,
        *padded_labels(issue.labels),
        priority,
    ]
