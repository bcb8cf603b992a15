"""Classification of pull requests and issues into report buckets.

Every filter is stable: items keep the order in which the API returned them.
"""

import logging
from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from ..config import DigestConfig
from ..github_client.models import GitHubIssue, GitHubPullRequest
from .window import ReportingWindow

logger = logging.getLogger(__name__)

# PRs touched more recently than this are not yet nagged about.
REVIEW_STALENESS = timedelta(hours=24)


class DigestBuckets(BaseModel):
    """The four report sections for one run."""

    merged: list[GitHubPullRequest] = Field(default_factory=list)
    waiting_review: list[GitHubPullRequest] = Field(default_factory=list)
    in_progress: list[GitHubPullRequest] = Field(default_factory=list)
    issues_opened: list[GitHubIssue] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.merged or self.waiting_review or self.in_progress or self.issues_opened
        )


def merged_this_week(
    pull_requests: list[GitHubPullRequest],
    config: DigestConfig,
    window: ReportingWindow,
) -> list[GitHubPullRequest]:
    """PRs merged within the reporting window by non-excluded authors."""
    return [
        pr
        for pr in pull_requests
        if pr.merged_at is not None
        and not config.is_excluded(pr.author_login)
        and window.contains(pr.merged_at)
    ]


def waiting_for_review(
    pull_requests: list[GitHubPullRequest],
    config: DigestConfig,
    now: datetime,
) -> list[GitHubPullRequest]:
    """Open, non-draft PRs labelled ready and untouched for over a day."""
    cutoff = now - REVIEW_STALENESS
    return [
        pr
        for pr in pull_requests
        if pr.state == "open"
        and not pr.draft
        and pr.merged_at is None
        and not config.is_excluded(pr.author_login)
        and pr.has_label(config.ready_label)
        and pr.updated_at < cutoff
    ]


def in_progress(
    pull_requests: list[GitHubPullRequest],
    config: DigestConfig,
    window: ReportingWindow,
) -> list[GitHubPullRequest]:
    """Open PRs created since the window start that are not yet ready."""
    return [
        pr
        for pr in pull_requests
        if pr.state == "open"
        and not config.is_excluded(pr.author_login)
        and pr.created_at >= window.start
        and not pr.has_label(config.ready_label)
    ]


def issues_opened(
    issues: list[GitHubIssue], config: DigestConfig
) -> list[GitHubIssue]:
    """Issues whose author, when known, is not excluded."""
    return [issue for issue in issues if not config.is_excluded(issue.author_login)]


def classify(
    pull_requests: list[GitHubPullRequest],
    issues: list[GitHubIssue],
    config: DigestConfig,
    window: ReportingWindow,
    now: datetime,
) -> DigestBuckets:
    """Partition fetched items into the four report buckets.

    Args:
        pull_requests: Pull requests in API order
        issues: Open issues updated since the window start, PRs already removed
        config: Run configuration (ready label, excluded users)
        window: Reporting window
        now: Reference time for the review staleness check

    Returns:
        DigestBuckets with each bucket in input order
    """
    buckets = DigestBuckets(
        merged=merged_this_week(pull_requests, config, window),
        waiting_review=waiting_for_review(pull_requests, config, now),
        in_progress=in_progress(pull_requests, config, window),
        issues_opened=issues_opened(issues, config),
    )
    logger.debug(
        "Classified: merged=%d waiting=%d in_progress=%d issues=%d",
        len(buckets.merged),
        len(buckets.waiting_review),
        len(buckets.in_progress),
        len(buckets.issues_opened),
    )
    return buckets
