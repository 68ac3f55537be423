"""CLI entry point for zenhub-export."""

from __future__ import annotations

from pathlib import Path

import click

from zenhub_export import __version__
from zenhub_export.config import ConfigError, ExportConfig, load_env_files
from zenhub_export.exporter import ExportError, Exporter
from zenhub_export.github import GitHubClient
from zenhub_export.logging import get_logger, setup_logging
from zenhub_export.zenhub import ZenHubClient

logger = get_logger("cli")


def _split_list(ctx: click.Context, param: click.Parameter, value: str | None) -> list[str]:
    """Parse a comma-separated option value ("app1,app2") into a list."""
    if value is None:
        return []
    items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


@click.command()
@click.version_option(__version__)
@click.option(
    "-o",
    "--owner",
    required=True,
    help="Name of the repository owner",
)
@click.option(
    "-r",
    "--repos",
    required=True,
    callback=_split_list,
    metavar="app1,app2,app3",
    help="List of repository names",
)
@click.option(
    "-p",
    "--pipelines",
    required=True,
    callback=_split_list,
    metavar="todo,done",
    help="List of ZenHub pipelines to export",
)
@click.option(
    "-d",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory for the CSV files",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for log files (default: ./logs or ZENHUB_EXPORT_LOG_DIR)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
def main(
    owner: str,
    repos: list[str],
    pipelines: list[str],
    output_dir: Path,
    log_dir: Path | None,
    verbose: bool,
) -> None:
    """Export ZenHub pipelines of GitHub repositories to Jira CSV files.

    Writes one <repo>_<pipeline>.csv per repository and selected pipeline.
    Tokens are read from GITHUB_API_TOKEN and ZENHUB_API_TOKEN (.env and
    .env.local are loaded first; .env wins over .env.local).
    """
    load_env_files()
    setup_logging(log_dir=log_dir, level="DEBUG" if verbose else None)

    try:
        config = ExportConfig.from_env(owner, repos, pipelines, output_dir=output_dir)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logger.debug(
        "Exporting %d repo(s) of %s, pipelines: %s",
        len(config.repos),
        config.owner,
        ", ".join(config.pipelines),
    )
    github = GitHubClient(config.owner, config.github_token, base_url=config.github_api_url)
    zenhub = ZenHubClient(config.zenhub_token, base_url=config.zenhub_api_url)
    exporter = Exporter(
        repos=config.repos,
        pipelines=config.pipelines,
        github=github,
        zenhub=zenhub,
        output_dir=config.output_dir,
    )

    try:
        result = exporter.export()
    except ExportError as e:
        raise click.ClickException(f"Export failed: {e}") from e
    finally:
        github.close()
        zenhub.close()

    click.echo(f"Wrote {len(result.files)} file(s) to {config.output_dir}")


if __name__ == "__main__":
    main()
