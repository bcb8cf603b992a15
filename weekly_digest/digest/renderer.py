"""Rendering of digest buckets into rich-markup and plain-text reports."""

from ..github_client.models import GitHubIssue, GitHubPullRequest
from .classifier import DigestBuckets
from .window import ReportingWindow, format_date_range

EMPTY_REPORT = "No items to report this week."
EMPHASIS = "**"

SECTION_MERGED = "- PR Merged ✅"
SECTION_WAITING = "- PR Waiting for Review ⚠️"
SECTION_IN_PROGRESS = "- PR In Progress 🚧"
SECTION_ISSUES = "- Issues Opened ❗"

ITEM_INDENT = "    "
PLAIN_FOOTER = "Have a nice week! ✨"


def pull_request_url(repo: str, number: int) -> str:
    return f"https://github.com/{repo}/pull/{number}"


def issue_url(repo: str, number: int) -> str:
    return f"https://github.com/{repo}/issues/{number}"


def _item_line(title: str, url: str, login: str) -> str:
    return f"{ITEM_INDENT}- {EMPHASIS}{title}{EMPHASIS} {url} {login}"


def _pull_request_lines(prs: list[GitHubPullRequest], repo: str) -> list[str]:
    return [
        _item_line(pr.title, pull_request_url(repo, pr.number), pr.author_login)
        for pr in prs
    ]


def _issue_lines(issues: list[GitHubIssue], repo: str) -> list[str]:
    # Issues without an author are kept by the classifier but never rendered.
    return [
        _item_line(issue.title, issue_url(repo, issue.number), issue.author_login)
        for issue in issues
        if issue.author_login is not None
    ]


def render_rich(buckets: DigestBuckets, repo: str) -> str:
    """Render the markdown-style report.

    Sections appear in fixed order and only when their bucket is non-empty.

    Args:
        buckets: Classified items
        repo: Repository as owner/name, used to build item URLs

    Returns:
        Report text, or EMPTY_REPORT when every bucket is empty
    """
    sections = [
        (SECTION_MERGED, buckets.merged, _pull_request_lines(buckets.merged, repo)),
        (
            SECTION_WAITING,
            buckets.waiting_review,
            _pull_request_lines(buckets.waiting_review, repo),
        ),
        (
            SECTION_IN_PROGRESS,
            buckets.in_progress,
            _pull_request_lines(buckets.in_progress, repo),
        ),
        (SECTION_ISSUES, buckets.issues_opened, _issue_lines(buckets.issues_opened, repo)),
    ]

    lines: list[str] = []
    for header, bucket, item_lines in sections:
        if bucket:
            lines.append(header)
            lines.extend(item_lines)

    if not lines:
        return EMPTY_REPORT
    return "\n".join(lines) + "\n"


def strip_emphasis(text: str) -> str:
    """Remove bold markers from a rich report."""
    return text.replace(EMPHASIS, "")


def _is_section_header(line: str) -> bool:
    return line.startswith("- ")


def plain_header(window: ReportingWindow, team_name: str, project_name: str) -> str:
    return (
        f"Here's the weekly report on the {team_name} team's contributions 🥷\n"
        f"{format_date_range(window.start, window.end)}\n"
        f"\n"
        f"{project_name}:\n"
    )


def render_plain(
    rich: str, window: ReportingWindow, team_name: str, project_name: str
) -> str:
    """Derive the plain-text report from the rich report.

    Emphasis is stripped, each section header after the first gets a blank
    line before it, and the body is wrapped in the team header and sign-off.

    Args:
        rich: Output of render_rich
        window: Reporting window shown in the header
        team_name: Team named in the header line
        project_name: Heading placed above the body

    Returns:
        Plain-text report
    """
    body_lines: list[str] = []
    for line in strip_emphasis(rich).splitlines():
        if _is_section_header(line) and body_lines:
            body_lines.append("")
        body_lines.append(line)
    body = "\n".join(body_lines)

    return f"{plain_header(window, team_name, project_name)}\n{body}\n\n{PLAIN_FOOTER}"
