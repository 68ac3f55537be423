"""Configuration for export runs."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

GITHUB_TOKEN_VAR = "GITHUB_API_TOKEN"
ZENHUB_TOKEN_VAR = "ZENHUB_API_TOKEN"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_ZENHUB_API_URL = "https://api.zenhub.io"
# First file loaded wins: .env takes precedence over .env.local
ENV_FILES = (".env", ".env.local")


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class ExportConfig:
    """Everything an export run needs, resolved once at startup.

    Attributes:
        owner: User or organization owning the repositories.
        repos: Repository names, exported in this order.
        pipelines: ZenHub pipeline names to export (full names, prefixes included).
        github_token: GitHub API token.
        zenhub_token: ZenHub API token.
        output_dir: Directory receiving the CSV files.
        github_api_url: GitHub API base URL.
        zenhub_api_url: ZenHub API base URL.
    """

    owner: str
    repos: list[str]
    pipelines: list[str]
    github_token: str
    zenhub_token: str
    output_dir: Path = field(default_factory=Path)
    github_api_url: str = DEFAULT_GITHUB_API_URL
    zenhub_api_url: str = DEFAULT_ZENHUB_API_URL

    def __post_init__(self) -> None:
        if not self.owner:
            raise ConfigError("Repository owner is required")
        if not self.repos:
            raise ConfigError("At least one repository is required")
        if not self.pipelines:
            raise ConfigError("At least one pipeline is required")

    @classmethod
    def from_env(
        cls,
        owner: str,
        repos: list[str],
        pipelines: list[str],
        output_dir: str | Path = ".",
        env: Mapping[str, str] | None = None,
    ) -> ExportConfig:
        """Create config from CLI values plus tokens from the environment.

        Args:
            owner: Repository owner.
            repos: Repository names.
            pipelines: Pipeline names to export.
            output_dir: Directory receiving the CSV files.
            env: Environment mapping (defaults to os.environ).

        Returns:
            Resolved configuration.

        Raises:
            ConfigError: If a token is missing or a value is empty.
        """
        if env is None:
            env = os.environ

        missing = [var for var in (GITHUB_TOKEN_VAR, ZENHUB_TOKEN_VAR) if not env.get(var)]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

        return cls(
            owner=owner,
            repos=list(repos),
            pipelines=list(pipelines),
            github_token=env[GITHUB_TOKEN_VAR],
            zenhub_token=env[ZENHUB_TOKEN_VAR],
            output_dir=Path(output_dir),
            github_api_url=env.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL,
            zenhub_api_url=env.get("ZENHUB_API_URL") or DEFAULT_ZENHUB_API_URL,
        )


def load_env_files(root: str | Path = ".") -> list[Path]:
    """Load .env and .env.local into os.environ.

    Variables already set in the environment are never overridden. A value
    in .env wins over the same variable in .env.local; .env.local only adds
    variables .env leaves unset.

    Returns:
        The env files that were found and loaded.
    """
    loaded = []
    for name in ENV_FILES:
        path = Path(root) / name
        if path.is_file():
            load_dotenv(path, override=False)
            loaded.append(path)
    return loaded
