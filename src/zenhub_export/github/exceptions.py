"""Custom exceptions for the GitHub issue source."""


class GitHubError(Exception):
    """Base exception for GitHub API errors."""


class GitHubAuthError(GitHubError):
    """Token missing, invalid, or lacking access to the repository."""


class GitHubRateLimitError(GitHubError):
    """GitHub API rate limit exhausted."""


class RepositoryNotFoundError(GitHubError):
    """Repository does not exist or is not visible to the token."""
