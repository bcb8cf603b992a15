"""Configuration for the weekly digest run."""

import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError

DEFAULT_READY_LABEL = "ready for review"
DEFAULT_EXCLUDED_USERS = frozenset(
    {"dependabot[bot]", "github-actions[bot]", "renovate[bot]"}
)
DEFAULT_TEAM_NAME = "Samourai"


def parse_user_list(value: str | None) -> frozenset[str]:
    """Parse a comma-separated list of logins, dropping blanks.

    Example:
        >>> sorted(parse_user_list("alice, bob,,"))
        ['alice', 'bob']
    """
    if not value:
        return frozenset()
    return frozenset(filter(None, (login.strip() for login in value.split(","))))


class DigestConfig(BaseModel):
    """Settings for one digest run, built once at the process boundary."""

    model_config = {"frozen": True}

    token: str = Field(..., min_length=1, description="GitHub access token")
    repo: str = Field(..., description="Target repository as owner/name")
    ready_label: str = Field(
        DEFAULT_READY_LABEL, description="Label marking a PR ready for review"
    )
    excluded_users: frozenset[str] = Field(
        DEFAULT_EXCLUDED_USERS,
        description="Author logins omitted from every report section",
    )
    team_name: str = Field(DEFAULT_TEAM_NAME, description="Team name for headers")
    project_name: str | None = Field(
        None, description="Project heading in the plain report (defaults to repo)"
    )

    @field_validator("repo")
    @classmethod
    def _validate_repo(cls, value: str) -> str:
        parts = value.strip().split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Invalid repository '{value}'. Expected format: owner/name"
            )
        return value.strip()

    @property
    def owner(self) -> str:
        return self.repo.split("/")[0]

    @property
    def name(self) -> str:
        return self.repo.split("/")[1]

    @property
    def heading(self) -> str:
        """Project heading shown above the plain report body."""
        return self.project_name or self.name

    def is_excluded(self, login: str | None) -> bool:
        """Check whether an author login is on the exclusion list.

        A missing login is never excluded.
        """
        return login is not None and login in self.excluded_users

    @classmethod
    def from_env(
        cls,
        token: str | None = None,
        repo: str | None = None,
        ready_label: str | None = None,
        excluded_users: str | None = None,
    ) -> "DigestConfig":
        """Build configuration from explicit values, falling back to env vars.

        Args:
            token: GitHub token. Defaults to GITHUB_TOKEN.
            repo: owner/name. Defaults to DIGEST_REPO.
            ready_label: Ready-for-review label. Defaults to DIGEST_READY_LABEL.
            excluded_users: Comma-separated logins. Defaults to
                DIGEST_EXCLUDED_USERS.

        Raises:
            ConfigurationError: If the token or repository is missing or invalid
        """
        token = token or os.getenv("GITHUB_TOKEN")
        if not token:
            raise ConfigurationError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        repo = repo or os.getenv("DIGEST_REPO")
        if not repo:
            raise ConfigurationError(
                "Repository is required. Set DIGEST_REPO environment variable "
                "(owner/name) or pass --repo."
            )

        values: dict[str, object] = {"token": token, "repo": repo}

        label = ready_label or os.getenv("DIGEST_READY_LABEL")
        if label:
            values["ready_label"] = label

        users = excluded_users or os.getenv("DIGEST_EXCLUDED_USERS")
        if users is not None:
            values["excluded_users"] = parse_user_list(users)

        if team := os.getenv("DIGEST_TEAM_NAME"):
            values["team_name"] = team
        if project := os.getenv("DIGEST_PROJECT_NAME"):
            values["project_name"] = project

        try:
            return cls(**values)  # type: ignore[arg-type]
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
