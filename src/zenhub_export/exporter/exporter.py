"""Exporter - Writes one Jira CSV per repository and selected pipeline."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from zenhub_export.exporter.exceptions import ExportError
from zenhub_export.exporter.formatter import CSV_HEADERS, export_row
from zenhub_export.exporter.models import ExportedFile, ExportResult
from zenhub_export.exporter.reconciler import bare_pipeline_name, priority_for, reconcile
from zenhub_export.github.exceptions import GitHubError
from zenhub_export.logging import get_logger
from zenhub_export.zenhub.exceptions import ZenHubError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from zenhub_export.github.models import Issue, Repository
    from zenhub_export.zenhub.models import Board

logger = get_logger("exporter")


class IssueSource(Protocol):
    """Interface for fetching repositories and their issues."""

    def fetch_repository(self, name: str) -> Repository:
        """Get a repository descriptor by name."""
        ...

    def fetch_issues(self, name: str) -> dict[int, Issue]:
        """Get all issues of a repository keyed by number."""
        ...


class BoardSource(Protocol):
    """Interface for fetching board snapshots."""

    def fetch_board(self, repository_id: int) -> Board:
        """Get the board snapshot of a repository."""
        ...


class Exporter:
    """Drives the export: repositories x selected pipelines -> CSV files.

    Runs strictly sequentially. The first failed fetch aborts the run with
    an ExportError; files written for earlier pipelines stay on disk.
    Two selected pipelines with the same bare name (e.g. "A/Backlog" and
    "B/Backlog") would share a file; only the first of them is exported.
    """

    def __init__(
        self,
        repos: list[str],
        pipelines: Iterable[str],
        github: IssueSource,
        zenhub: BoardSource,
        output_dir: str | Path = ".",
    ) -> None:
        """Initialize the Exporter.

        Args:
            repos: Repository names, exported in this order.
            pipelines: Pipeline names to export, matched against the full
                board name (before any prefix is stripped).
            github: Source of repositories and issues.
            zenhub: Source of board snapshots.
            output_dir: Directory receiving the CSV files.
        """
        self.repos = list(repos)
        self.pipelines = set(pipelines)
        self.github = github
        self.zenhub = zenhub
        self.output_dir = Path(output_dir)

    def export(self) -> ExportResult:
        """Export every configured repository.

        Returns:
            ExportResult listing the written files.

        Raises:
            ExportError: If any fetch fails.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        result = ExportResult()
        for name in self.repos:
            repository = self._fetch_repository(name)
            result.files.extend(self.export_repository(repository))
        logger.info(
            "Export complete: %d file(s), %d issue row(s)", len(result.files), result.total_rows
        )
        return result

    def export_repository(self, repository: Repository) -> list[ExportedFile]:
        """Export the selected pipelines of one repository.

        Args:
            repository: Repository descriptor (its id keys the board).

        Returns:
            Files written, in board pipeline order.
        """
        logger.info("Repo: %s", repository.name)
        board = self._fetch_board(repository)
        issues = self._fetch_issues(repository)

        written = []
        exported_names: dict[str, str] = {}
        for pipeline in board.pipelines:
            if pipeline.name not in self.pipelines:
                logger.debug("Skipping unselected pipeline %s", pipeline.name)
                continue
            logger.info("Pipeline: %s", pipeline.name)

            pipeline_name = bare_pipeline_name(pipeline.name)
            if pipeline_name in exported_names:
                # One file per bare name; never let a later pipeline overwrite it
                logger.warning(
                    "Skipping pipeline %s: %s_%s.csv was already written for pipeline %s",
                    pipeline.name,
                    repository.name,
                    pipeline_name,
                    exported_names[pipeline_name],
                )
                continue
            exported_names[pipeline_name] = pipeline.name

            priority = priority_for(pipeline_name)
            rows = [export_row(issue, priority) for issue in reconcile(pipeline, issues)]
            path = self.output_dir / f"{repository.name}_{pipeline_name}.csv"
            self._write_csv(path, rows)
            written.append(
                ExportedFile(
                    repository=repository.name,
                    pipeline=pipeline_name,
                    path=path,
                    rows=len(rows),
                )
            )

        if not written:
            logger.info("No selected pipelines on board for %s", repository.name)
        return written

    def _write_csv(self, path: Path, rows: list[list[str]]) -> None:
        # "w" mode: every run fully replaces earlier output
        with path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADERS)
            writer.writerows(rows)
        logger.debug("Wrote %d row(s) to %s", len(rows), path)

    def _fetch_repository(self, name: str) -> Repository:
        try:
            return self.github.fetch_repository(name)
        except GitHubError as e:
            logger.error("Failed to fetch repository %s: %s", name, e)
            raise ExportError(name, "repository", str(e)) from e

    def _fetch_board(self, repository: Repository) -> Board:
        try:
            return self.zenhub.fetch_board(repository.id)
        except ZenHubError as e:
            logger.error("Failed to fetch board for %s: %s", repository.name, e)
            raise ExportError(repository.name, "board", str(e)) from e

    def _fetch_issues(self, repository: Repository) -> dict[int, Issue]:
        try:
            return self.github.fetch_issues(repository.name)
        except GitHubError as e:
            logger.error("Failed to fetch issues for %s: %s", repository.name, e)
            raise ExportError(repository.name, "issues", str(e)) from e
