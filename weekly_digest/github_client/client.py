"""GitHub API client using PyGitHub."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, TypeVar

import requests
from github import Auth, Github
from github.GithubException import GithubException, UnknownObjectException
from github.Issue import Issue
from github.Label import Label
from github.NamedUser import NamedUser
from github.PaginatedList import PaginatedList
from github.PullRequest import PullRequest
from github.Repository import Repository
from pydantic import ValidationError

from ..errors import ConfigurationError, ItemMappingError, TransportError
from .models import GitHubIssue, GitHubLabel, GitHubPullRequest, GitHubUser

logger = logging.getLogger(__name__)

# The digest only ever reads the first page of each listing.
PAGE_SIZE = 100

T = TypeVar("T")


class GitHubClient:
    """Read-only GitHub API client for the pull request and issue listings."""

    def __init__(self, token: str | None, page_size: int = PAGE_SIZE):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token.
            page_size: Number of items requested per listing page.

        Raises:
            ConfigurationError: If no token is given
        """
        if not token:
            raise ConfigurationError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.token = token
        self.page_size = page_size
        self.github = Github(auth=Auth.Token(token), per_page=page_size, lazy=True)

    def _convert_user(self, github_user: NamedUser | None) -> GitHubUser | None:
        """Convert PyGitHub user to our model."""
        if github_user is None:
            return None
        return GitHubUser(login=github_user.login)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(name=github_label.name)

    def _convert_pull_request(self, github_pr: PullRequest) -> GitHubPullRequest:
        """Convert PyGitHub pull request to our model."""
        return GitHubPullRequest(
            number=github_pr.number,
            title=github_pr.title,
            user=self._convert_user(github_pr.user),  # type: ignore[arg-type]
            state=github_pr.state,  # type: ignore[arg-type]
            draft=bool(github_pr.draft),
            labels=[self._convert_label(label) for label in github_pr.labels],
            created_at=github_pr.created_at,
            updated_at=github_pr.updated_at,
            merged_at=github_pr.merged_at,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            user=self._convert_user(github_issue.user),
            state=github_issue.state,
            created_at=github_issue.created_at,
            updated_at=github_issue.updated_at,
            is_pull_request=github_issue.pull_request is not None,
        )

    def _first_page(self, listing: PaginatedList, what: str) -> list[Any]:
        """Fetch the first page of a paginated listing."""
        try:
            return list(listing.get_page(0))
        except UnknownObjectException as e:
            raise TransportError(f"Not found while listing {what}: {e.data}") from e
        except GithubException as e:
            raise TransportError(
                f"GitHub API error {e.status} while listing {what}: {e.data}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed while listing {what}: {e}") from e

    def _map(self, convert: Callable[[Any], T], item: Any, what: str) -> T:
        """Apply a converter, reporting shape mismatches as mapping errors."""
        try:
            return convert(item)
        except (ValidationError, AttributeError, TypeError) as e:
            number = getattr(item, "number", "?")
            raise ItemMappingError(f"Could not map {what} #{number}: {e}") from e

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get a lazy repository object; no request is made until listing."""
        return self.github.get_repo(f"{owner}/{repo}")

    def list_pull_requests(self, owner: str, repo: str) -> list[GitHubPullRequest]:
        """List pull requests in any state, most recently updated first.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Up to one page of GitHubPullRequest objects in API order

        Raises:
            TransportError: If the API call fails
            ItemMappingError: If an item does not match the expected shape
        """
        repository = self.get_repository(owner, repo)
        listing = repository.get_pulls(state="all", sort="updated", direction="desc")
        raw = self._first_page(listing, "pull requests")

        pull_requests = [
            self._map(self._convert_pull_request, pr, "pull request") for pr in raw
        ]
        logger.info(
            "Fetched %d pull requests from %s/%s", len(pull_requests), owner, repo
        )
        return pull_requests

    def list_issues(self, owner: str, repo: str, since: datetime) -> list[GitHubIssue]:
        """List open issues updated at or after ``since``, excluding pull requests.

        Args:
            owner: Repository owner
            repo: Repository name
            since: Only issues updated at or after this time are returned

        Returns:
            Up to one page of GitHubIssue objects in API order

        Raises:
            TransportError: If the API call fails
            ItemMappingError: If an item does not match the expected shape
        """
        repository = self.get_repository(owner, repo)
        # PyGithub formats since as a UTC "Z" timestamp without converting it.
        listing = repository.get_issues(
            state="open", since=since.astimezone(timezone.utc)
        )
        raw = self._first_page(listing, "issues")

        issues = [self._map(self._convert_issue, issue, "issue") for issue in raw]
        result = [issue for issue in issues if not issue.is_pull_request]
        logger.info(
            "Fetched %d issues from %s/%s (%d pull requests dropped)",
            len(result),
            owner,
            repo,
            len(issues) - len(result),
        )
        return result
