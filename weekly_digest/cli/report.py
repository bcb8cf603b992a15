"""CLI command for generating the weekly digest."""

from datetime import datetime

import typer
from rich.console import Console

from ..config import DigestConfig
from ..digest.pipeline import DigestReport, generate_digest
from ..digest.window import format_date_range
from ..errors import DigestError
from ..github_client.client import GitHubClient
from ..utils.date_parser import parse_as_of
from ..utils.logging_setup import setup_logging
from .options import (
    AS_OF_OPTION,
    EXCLUDE_USERS_OPTION,
    READY_LABEL_OPTION,
    REPO_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

# Status output goes to stderr; stdout carries only the reports.
console = Console(stderr=True)

MARKDOWN_LABEL = "Markdown Report:"
SIGNAL_LABEL = "Signal report:"


def print_report(report: DigestReport) -> None:
    """Write both report formats to stdout, each under its label line."""
    typer.echo(MARKDOWN_LABEL)
    typer.echo(report.rich)
    typer.echo("")
    typer.echo(SIGNAL_LABEL)
    typer.echo(report.plain)


def report(
    repo: str | None = REPO_OPTION,
    token: str | None = TOKEN_OPTION,
    ready_label: str | None = READY_LABEL_OPTION,
    exclude_users: str | None = EXCLUDE_USERS_OPTION,
    as_of: str | None = AS_OF_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate the weekly digest for a repository and print it.

    Reports last week's merged PRs, PRs waiting for review, PRs in progress
    and newly opened issues.

    Examples:
        weekly-digest report --repo octo-org/octo-repo
        weekly-digest report -r octo-org/octo-repo --as-of 2024-06-10
    """
    setup_logging(verbose)

    try:
        now = parse_as_of(as_of) if as_of else datetime.now().astimezone()
    except ValueError as e:
        console.print(f"❌ Error: {e}", markup=False)
        raise typer.Exit(1)

    try:
        config = DigestConfig.from_env(
            token=token,
            repo=repo,
            ready_label=ready_label,
            excluded_users=exclude_users,
        )
        console.print(f"🔑 Initializing GitHub client for {config.repo}...")
        client = GitHubClient(token=config.token)

        console.print("🔎 Fetching pull requests and issues...")
        digest = generate_digest(config, now, client=client)
    except DigestError as e:
        console.print(f"❌ Error: {e}", markup=False)
        raise typer.Exit(1)

    buckets = digest.buckets
    console.print(
        f"✅ {format_date_range(digest.window.start, digest.window.end)}: "
        f"{len(buckets.merged)} merged, {len(buckets.waiting_review)} waiting, "
        f"{len(buckets.in_progress)} in progress, "
        f"{len(buckets.issues_opened)} issues"
    )
    print_report(digest)
