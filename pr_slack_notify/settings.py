from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from pr_slack_notify.config_loader import load_repo_config

DEFAULT_PR_APPROVED_FORMAT = (
    "Pull request *{ pull_request.title }* was approved by "
    "{ review.user.login } :heavy_check_mark:"
)
DEFAULT_PR_REJECTED_FORMAT = (
    "Pull request *{ pull_request.title }* was rejected by "
    "{ review.user.login } :cry:"
)
DEFAULT_PR_READY_FOR_REVIEW_FORMAT = (
    ":rocket: New PR ready for review! :rocket:\n"
    "Title: *{ pull_request.title }*\n"
    "Author: { pull_request.user.login }\n"
    "URL: { pull_request.html_url }"
)


class ConfigurationError(Exception):
    """Raised when a setting needed for the current step is not configured."""


class Settings(BaseSettings):
    # --- Slack ---
    slack_channel: str = ""  # channel name without the leading "#"
    slack_webhook: str = ""  # incoming webhook URL
    username: str = "ReadyForReviewBot"

    # --- Behavior ---
    ignore_drafts: bool = True

    # --- Message templates ---
    pr_approved_format: str = DEFAULT_PR_APPROVED_FORMAT
    pr_rejected_format: str = DEFAULT_PR_REJECTED_FORMAT
    pr_ready_for_review_format: str = DEFAULT_PR_READY_FOR_REVIEW_FORMAT

    # --- GitHub ---
    github_token: str = ""  # In Actions, pass secrets.GITHUB_TOKEN through
    repo_name: Optional[str] = None  # e.g., "octo-org/octo-repo"
    github_api_url: str = "https://api.github.com"
    github_event_path: Optional[str] = None  # set by the Actions runner

    # --- Pydantic settings ---
    # Empty variables (e.g. an unset workflow input) fall back to the defaults.
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        frozen=True,
    )

    def missing_required(self) -> List[str]:
        """Names of required variables that are not set, in report order."""
        missing = []
        if not self.slack_channel:
            missing.append("SLACK_CHANNEL")
        if not self.slack_webhook:
            missing.append("SLACK_WEBHOOK")
        return missing

    def require_github(self) -> None:
        if not self.github_token:
            raise ConfigurationError(
                "GITHUB_TOKEN is not set. Set it with\n"
                "env:\n\tGITHUB_TOKEN: ${{ secrets.GITHUB_TOKEN }}"
            )
        if not self.repo_name:
            raise ConfigurationError(
                "REPO_NAME is not set. Set it with\n"
                "env:\n\tREPO_NAME: ${{ github.repository }}"
            )


def load_settings(base_dir: str = ".") -> Settings:
    """
    Build the configuration for one run: environment first, then the
    repo config file (if present) on top of it.
    """
    overrides = {}
    for k, v in load_repo_config(base_dir).items():
        key = str(k).lower()
        if key in Settings.model_fields:
            overrides[key] = v
    return Settings(**overrides)
