"""Custom exceptions for the ZenHub board source."""


class ZenHubError(Exception):
    """Base exception for ZenHub API errors."""


class ZenHubAuthError(ZenHubError):
    """Token missing or invalid."""


class ZenHubRateLimitError(ZenHubError):
    """ZenHub API rate limit exhausted."""


class BoardNotFoundError(ZenHubError):
    """No board exists for the repository."""
