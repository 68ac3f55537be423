"""ZenHub board source - Fetches pipeline snapshots from ZenHub."""

from zenhub_export.zenhub.client import ZenHubClient
from zenhub_export.zenhub.exceptions import (
    BoardNotFoundError,
    ZenHubAuthError,
    ZenHubError,
    ZenHubRateLimitError,
)
from zenhub_export.zenhub.models import Board, Pipeline, PipelineReference

__all__ = [
    "Board",
    "BoardNotFoundError",
    "Pipeline",
    "PipelineReference",
    "ZenHubAuthError",
    "ZenHubClient",
    "ZenHubError",
    "ZenHubRateLimitError",
]
