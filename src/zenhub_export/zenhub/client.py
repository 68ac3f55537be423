"""ZenHubClient - Fetches board snapshots from the ZenHub REST API."""

from __future__ import annotations

import httpx

from zenhub_export.logging import get_logger, sanitize_for_log
from zenhub_export.zenhub.exceptions import (
    BoardNotFoundError,
    ZenHubAuthError,
    ZenHubError,
    ZenHubRateLimitError,
)
from zenhub_export.zenhub.models import Board

logger = get_logger("zenhub")


class ZenHubClient:
    """Read-only client for the ZenHub public API (v1)."""

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.zenhub.io",
    ) -> None:
        """Initialize ZenHub client.

        Args:
            token: ZenHub API token
            base_url: ZenHub API base URL (for testing/enterprise)
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for ZenHub API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={"X-Authentication-Token": self.token},
                timeout=30.0,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def fetch_board(self, repository_id: int) -> Board:
        """Get the board snapshot for a repository.

        Args:
            repository_id: Numeric GitHub repository ID

        Returns:
            Board with pipelines and their issue entries in display order

        Raises:
            ZenHubError: If the board can't be fetched
        """
        url = f"/p1/repositories/{repository_id}/board"
        logger.debug("Fetching ZenHub board for repository %s", repository_id)
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            raise ZenHubError(
                f"ZenHub request for repository {repository_id} failed: "
                f"{sanitize_for_log(str(e))}"
            ) from e

        if response.status_code != 200:
            detail = f"{response.status_code} - {sanitize_for_log(response.text)}"
            remaining = response.headers.get("x-ratelimit-remaining")
            if response.status_code == 429 or (response.status_code == 403 and remaining == "0"):
                raise ZenHubRateLimitError(f"ZenHub rate limit exceeded: {detail}")
            if response.status_code in (401, 403):
                raise ZenHubAuthError(f"ZenHub denied access: {detail}")
            if response.status_code == 404:
                raise BoardNotFoundError(f"No ZenHub board for repository {repository_id}")
            raise ZenHubError(f"Failed to fetch board for repository {repository_id}: {detail}")

        try:
            board = Board.from_zenhub(response.json())
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ZenHubError(
                f"Malformed board payload for repository {repository_id}: {e!r}"
            ) from e
        logger.debug(
            "Board for repository %s has %d pipeline(s)", repository_id, len(board.pipelines)
        )
        return board
