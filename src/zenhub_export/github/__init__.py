"""GitHub issue source - Fetches repositories and issues from the GitHub REST API."""

from zenhub_export.github.client import GitHubClient
from zenhub_export.github.exceptions import (
    GitHubAuthError,
    GitHubError,
    GitHubRateLimitError,
    RepositoryNotFoundError,
)
from zenhub_export.github.models import Issue, Repository

__all__ = [
    "GitHubAuthError",
    "GitHubClient",
    "GitHubError",
    "GitHubRateLimitError",
    "Issue",
    "Repository",
    "RepositoryNotFoundError",
]
