from dataclasses import dataclass
from typing import Any, Dict, Union

from pr_slack_notify.idempotency import already_notified, record_notified
from pr_slack_notify.services.github import GitHubClient
from pr_slack_notify.services.slack import SlackWebhookClient
from pr_slack_notify.settings import Settings
from pr_slack_notify.template import render

READY_ACTIONS = ("ready_for_review", "opened", "synchronize", "reopened")


@dataclass(frozen=True)
class Skip:
    reason: str


@dataclass(frozen=True)
class Notify:
    message: str


Outcome = Union[Skip, Notify]


def _review_outcome(payload: Dict[str, Any], settings: Settings) -> Outcome:
    review = payload["review"]
    state = review.get("state") if isinstance(review, dict) else None
    if state == "approved":
        return Notify(render(payload, settings.pr_approved_format))
    if state == "changes_requested":
        return Notify(render(payload, settings.pr_rejected_format))
    return Skip(f"review state '{state}' does not trigger a notification")


def _pull_request(payload: Dict[str, Any]) -> Dict[str, Any]:
    pr = payload.get("pull_request")
    if not isinstance(pr, dict):
        raise ValueError("Event payload has no pull_request object")
    return pr


def _pr_number(pr: Dict[str, Any]) -> int:
    number = pr.get("number")
    if number is None:
        raise ValueError("Event payload pull_request has no number")
    return int(number)


async def decide(
    payload: Dict[str, Any], settings: Settings, gh: GitHubClient
) -> Outcome:
    """
    Pick what to do for one event.

    Review events map straight to a message. Ready-for-review style events
    go through the marker-comment check, and the marker is written here,
    before the message is handed off.
    """
    # Any review object, even an empty one, selects the review branch
    if payload.get("review") is not None:
        return _review_outcome(payload, settings)

    action = payload.get("action")
    if action not in READY_ACTIONS:
        return Skip(f"action '{action}' without a review does not trigger a notification")

    pr = _pull_request(payload)
    if pr.get("draft") and settings.ignore_drafts:
        return Skip("pull request is a draft and drafts are ignored")

    number = _pr_number(pr)
    if await already_notified(gh, settings, number):
        return Skip(f"#{settings.slack_channel} was already notified about PR #{number}")
    await record_notified(gh, settings, number)
    return Notify(render(payload, settings.pr_ready_for_review_format))


async def dispatch(
    outcome: Outcome, settings: Settings, slack: SlackWebhookClient
) -> bool:
    """Send the message for a Notify outcome. Returns True if something was sent."""
    if isinstance(outcome, Skip):
        print(f"::notice::No notification sent: {outcome.reason}.")
        return False
    await slack.send(
        text=outcome.message,
        channel=settings.slack_channel,
        username=settings.username,
    )
    print(f"Notification sent to #{settings.slack_channel}.")
    return True
