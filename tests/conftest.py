"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from zenhub_export.github import Issue, Repository


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: live GitHub/ZenHub API calls (local only)")


def github_issue_payload(number: int, **overrides: Any) -> dict[str, Any]:
    """Build a GitHub REST API issue payload."""
    payload: dict[str, Any] = {
        "id": 1000 + number,
        "html_url": f"https://github.com/acme/app/issues/{number}",
        "number": number,
        "title": f"Issue {number}",
        "body": f"Body of issue {number}",
        "state": "open",
        "created_at": "2021-03-04T05:06:07Z",
        "closed_at": None,
        "labels": [],
        "user": {"login": "reporter"},
        "assignee": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_issue():
    """Factory for Issue objects with sensible defaults."""

    def _make(number: int, **overrides: Any) -> Issue:
        return Issue.from_github(github_issue_payload(number, **overrides))

    return _make


@pytest.fixture
def repository() -> Repository:
    """Sample repository descriptor."""
    return Repository(id=4242, name="app", full_name="acme/app")


@pytest.fixture
def issue_payload():
    """Factory for GitHub issue payloads."""
    return github_issue_payload
