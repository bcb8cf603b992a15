"""Shared CLI option definitions."""

import typer

REPO_OPTION = typer.Option(
    None,
    "--repo",
    "-r",
    help="Repository as owner/name (defaults to DIGEST_REPO env var)",
)

TOKEN_OPTION = typer.Option(
    None, "--token", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

READY_LABEL_OPTION = typer.Option(
    None,
    "--ready-label",
    help="Label marking a PR ready for review (defaults to DIGEST_READY_LABEL)",
)

EXCLUDE_USERS_OPTION = typer.Option(
    None,
    "--exclude-users",
    "-x",
    help="Comma-separated author logins to leave out (defaults to "
    "DIGEST_EXCLUDED_USERS)",
)

AS_OF_OPTION = typer.Option(
    None,
    "--as-of",
    help="Reference time instead of now (e.g. 2024-06-10, 2024-06-10T09:00:00Z)",
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
