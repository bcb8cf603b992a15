"""One fetch, classify and render pass."""

import logging
from datetime import datetime

from pydantic import BaseModel

from ..config import DigestConfig
from ..github_client.client import GitHubClient
from .classifier import DigestBuckets, classify
from .renderer import render_plain, render_rich
from .window import ReportingWindow, compute_reporting_window

logger = logging.getLogger(__name__)


class DigestReport(BaseModel):
    """Rendered output of a digest run."""

    window: ReportingWindow
    buckets: DigestBuckets
    rich: str
    plain: str


def generate_digest(
    config: DigestConfig, now: datetime, client: GitHubClient | None = None
) -> DigestReport:
    """Fetch, classify and render the weekly digest.

    The two API calls run one after the other; any error propagates.

    Args:
        config: Run configuration
        now: Reference time; determines the reporting window
        client: GitHub client to use, created from config.token when omitted

    Returns:
        DigestReport with both report formats
    """
    if now.tzinfo is None:
        now = now.astimezone()

    window = compute_reporting_window(now)
    logger.info("Reporting window: %s to %s", window.start, window.end)

    client = client or GitHubClient(token=config.token)
    pull_requests = client.list_pull_requests(config.owner, config.name)
    issues = client.list_issues(config.owner, config.name, since=window.start)

    buckets = classify(pull_requests, issues, config, window, now)
    rich = render_rich(buckets, config.repo)
    plain = render_plain(rich, window, config.team_name, config.heading)

    return DigestReport(window=window, buckets=buckets, rich=rich, plain=plain)
