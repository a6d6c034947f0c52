import asyncio
import json
import sys
from typing import Any, Dict

from pr_slack_notify.dispatcher import decide, dispatch
from pr_slack_notify.services.github import GitHubClient
from pr_slack_notify.services.slack import SlackWebhookClient
from pr_slack_notify.settings import Settings, load_settings

MISSING_HINTS = {
    "SLACK_CHANNEL": "Slack channel is not set. Set it with\nenv:\n\tSLACK_CHANNEL: your-channel",
    "SLACK_WEBHOOK": (
        "SLACK_WEBHOOK is not set. Set it with\n"
        "env:\n\tSLACK_WEBHOOK: ${{ secrets.SLACK_WEBHOOK }}"
    ),
}


def _fail(message: str) -> None:
    # Workflow commands are one line; multi-line messages need %0A escapes
    print(f"::error::{message.replace(chr(10), '%0A')}", file=sys.stderr)


def load_event_payload(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Event payload in {path} is not a JSON object")
    return data


async def run(settings: Settings) -> int:
    if not settings.github_event_path:
        raise ValueError("GITHUB_EVENT_PATH is not set; is this running inside GitHub Actions?")
    payload = load_event_payload(settings.github_event_path)

    gh = GitHubClient(token=settings.github_token, base_url=settings.github_api_url)
    slack = SlackWebhookClient(settings.slack_webhook)

    outcome = await decide(payload, settings, gh)
    await dispatch(outcome, settings, slack)
    return 0


async def main() -> int:
    try:
        settings = load_settings()
    except Exception as e:
        _fail(f"Invalid configuration: {e}")
        return 2

    missing = settings.missing_required()
    if missing:
        for name in missing:
            _fail(MISSING_HINTS[name])
        return 2

    try:
        return await run(settings)
    except Exception as e:
        _fail(str(e) or e.__class__.__name__)
        return 1


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
