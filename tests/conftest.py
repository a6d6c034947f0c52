import pytest

CONFIG_ENV_VARS = [
    "SLACK_CHANNEL",
    "SLACK_WEBHOOK",
    "IGNORE_DRAFTS",
    "PR_APPROVED_FORMAT",
    "PR_READY_FOR_REVIEW_FORMAT",
    "PR_REJECTED_FORMAT",
    "USERNAME",
    "GITHUB_TOKEN",
    "REPO_NAME",
    "GITHUB_API_URL",
    "GITHUB_EVENT_PATH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the runner's own env (and any .env / repo config) out of the tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
