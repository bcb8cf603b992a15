"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest

from weekly_digest.config import DigestConfig
from weekly_digest.digest.window import ReportingWindow
from weekly_digest.github_client.models import (
    GitHubIssue,
    GitHubLabel,
    GitHubPullRequest,
    GitHubUser,
)

# Wednesday; the reporting window is Monday June 2nd to Monday June 9th.
NOW = datetime(2025, 6, 11, 15, 0, tzinfo=timezone.utc)
WINDOW_START = datetime(2025, 6, 2, tzinfo=timezone.utc)
WINDOW_END = datetime(2025, 6, 9, tzinfo=timezone.utc)
READY = "ready for review"


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def window() -> ReportingWindow:
    return ReportingWindow(start=WINDOW_START, end=WINDOW_END)


@pytest.fixture
def config() -> DigestConfig:
    return DigestConfig(
        token="test_token",
        repo="octo-org/octo-repo",
        ready_label=READY,
        excluded_users=frozenset({"dependabot[bot]"}),
        team_name="Samourai",
        project_name="Dither",
    )


@pytest.fixture
def make_pr() -> Callable[..., GitHubPullRequest]:
    """Build pull requests with sensible defaults for a non-excluded open PR."""

    def _make(
        number: int = 1,
        title: str = "Add feature",
        login: str = "alice",
        state: str = "open",
        draft: bool = False,
        labels: list[str] | None = None,
        created_at: datetime = WINDOW_START + timedelta(days=1),
        updated_at: datetime = NOW - timedelta(hours=48),
        merged_at: datetime | None = None,
    ) -> GitHubPullRequest:
        return GitHubPullRequest(
            number=number,
            title=title,
            user=GitHubUser(login=login),
            state=state,  # type: ignore[arg-type]
            draft=draft,
            labels=[GitHubLabel(name=name) for name in labels or []],
            created_at=created_at,
            updated_at=updated_at,
            merged_at=merged_at,
        )

    return _make


@pytest.fixture
def make_issue() -> Callable[..., GitHubIssue]:
    """Build open issues; pass login=None for an authorless issue."""

    def _make(
        number: int = 10,
        title: str = "Something broke",
        login: str | None = "bob",
        **kwargs: Any,
    ) -> GitHubIssue:
        return GitHubIssue(
            number=number,
            title=title,
            user=GitHubUser(login=login) if login is not None else None,
            state="open",
            created_at=kwargs.get("created_at", WINDOW_START + timedelta(days=2)),
            updated_at=kwargs.get("updated_at", WINDOW_START + timedelta(days=3)),
        )

    return _make
