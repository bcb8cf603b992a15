"""Pydantic models for GitHub data structures.

These models map to the subset of GitHub REST API v3 response fields that the
weekly digest needs.
API Reference: https://docs.github.com/en/rest/pulls and
https://docs.github.com/en/rest/issues
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")


class GitHubPullRequest(BaseModel):
    """GitHub pull request model.

    Maps to GitHub REST API Pull Request object.
    API Reference: https://docs.github.com/en/rest/pulls/pulls
    """

    number: int = Field(..., description="Pull request number within the repository")
    title: str = Field(..., description="Title of the pull request (string)")
    user: GitHubUser = Field(..., description="Author of the pull request")
    state: Literal["open", "closed"] = Field(
        ..., description="Current state: 'open', 'closed' (string)"
    )
    draft: bool = Field(False, description="Whether the pull request is a draft")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the PR"
    )
    created_at: datetime = Field(..., description="Timestamp of PR creation (ISO 8601)")
    updated_at: datetime = Field(
        ..., description="Timestamp of last PR update (ISO 8601)"
    )
    merged_at: datetime | None = Field(
        None, description="Timestamp of merge, absent when unmerged (ISO 8601)"
    )

    @model_validator(mode="after")
    def _merged_implies_closed(self) -> "GitHubPullRequest":
        if self.merged_at is not None and self.state != "closed":
            raise ValueError(
                f"Pull request #{self.number} has merged_at but state '{self.state}'"
            )
        return self

    @property
    def author_login(self) -> str:
        return self.user.login

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]

    def has_label(self, name: str) -> bool:
        """Case-sensitive exact match against label names."""
        return name in self.label_names


class GitHubIssue(BaseModel):
    """GitHub issue model representing repository issues.

    Maps to GitHub REST API Issue object. The issues endpoint also returns
    pull requests; those are flagged through ``is_pull_request``.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    user: GitHubUser | None = Field(
        None, description="Creator of the issue, absent for deleted accounts"
    )
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    created_at: datetime = Field(
        ..., description="Timestamp of issue creation (ISO 8601)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last issue update (ISO 8601)"
    )
    is_pull_request: bool = Field(
        False, description="Whether the API item is actually a pull request"
    )

    @property
    def author_login(self) -> str | None:
        return self.user.login if self.user is not None else None
