"""GitHubClient - Fetches repository descriptors and issue lists from GitHub."""

from __future__ import annotations

from typing import Any

import httpx

from zenhub_export.github.exceptions import (
    GitHubAuthError,
    GitHubError,
    GitHubRateLimitError,
    RepositoryNotFoundError,
)
from zenhub_export.github.models import Issue, Repository
from zenhub_export.logging import get_logger, sanitize_for_log

logger = get_logger("github")

PER_PAGE = 100


class GitHubClient:
    """Read-only client for the GitHub REST API.

    Repositories are addressed as "{owner}/{name}". Issue lists are fetched
    in full (open and closed), following pagination links until exhausted.
    """

    def __init__(
        self,
        owner: str,
        token: str,
        base_url: str = "https://api.github.com",
    ) -> None:
        """Initialize GitHub client.

        Args:
            owner: User or organization owning the repositories
            token: GitHub personal access token with repo read scope
            base_url: GitHub API base URL (for testing/enterprise)
        """
        self.owner = owner
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GitHub API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": "2022-11-28",
                },
                timeout=30.0,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Issue a GET request and raise on any non-200 response.

        Raises:
            GitHubError: On transport failure or unexpected status
        """
        try:
            response = self.client.get(url, params=params)
        except httpx.HTTPError as e:
            raise GitHubError(f"GitHub request to {url} failed: {sanitize_for_log(str(e))}") from e

        if response.status_code == 200:
            return response

        detail = f"{response.status_code} - {sanitize_for_log(response.text)}"
        remaining = response.headers.get("x-ratelimit-remaining")
        if response.status_code == 429 or (response.status_code == 403 and remaining == "0"):
            raise GitHubRateLimitError(f"GitHub rate limit exceeded for {url}: {detail}")
        if response.status_code in (401, 403):
            raise GitHubAuthError(f"GitHub denied access to {url}: {detail}")
        if response.status_code == 404:
            raise RepositoryNotFoundError(f"GitHub resource not found: {url}")
        raise GitHubError(f"GitHub request to {url} failed: {detail}")

    def _json(self, response: httpx.Response, url: str) -> Any:
        """Decode a response body, raising GitHubError if it isn't JSON."""
        try:
            return response.json()
        except ValueError as e:
            raise GitHubError(f"GitHub returned a non-JSON body for {url}: {e}") from e

    def fetch_repository(self, name: str) -> Repository:
        """Get a repository descriptor.

        Args:
            name: Repository name (without owner)

        Returns:
            Repository with id, name, and full_name

        Raises:
            RepositoryNotFoundError: If the repository doesn't exist
        """
        logger.debug("Fetching repository %s/%s", self.owner, name)
        url = f"/repos/{self.owner}/{name}"
        data = self._json(self._get(url), url)
        try:
            return Repository.from_github(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise GitHubError(f"Malformed repository payload from {url}: {e!r}") from e

    def fetch_issues(self, name: str) -> dict[int, Issue]:
        """Get every issue of a repository, open and closed.

        Args:
            name: Repository name (without owner)

        Returns:
            Mapping of issue number to Issue
        """
        logger.debug("Fetching issues for %s/%s", self.owner, name)
        issues: dict[int, Issue] = {}

        url: str | None = f"/repos/{self.owner}/{name}/issues"
        params: dict[str, Any] | None = {"state": "all", "per_page": PER_PAGE}
        pages = 0
        while url:
            response = self._get(url, params=params)
            pages += 1
            try:
                for data in self._json(response, url):
                    issue = Issue.from_github(data)
                    issues[issue.number] = issue
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise GitHubError(f"Malformed issue payload from {url}: {e!r}") from e

            # The next link already carries the query string
            url = response.links.get("next", {}).get("url")
            params = None

        logger.info("Fetched %d issue(s) for %s in %d page(s)", len(issues), name, pages)
        return issues
