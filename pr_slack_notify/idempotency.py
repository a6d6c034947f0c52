"""
Marker-comment idempotency for ready-for-review notifications.

A notification counts as sent when the pull request carries a comment whose
body is exactly `marker_text(settings)`. The check and the write are two
separate API calls, so two overlapping runs for the same pull request can
both see "not notified" and both notify. Only the first page (100 comments)
is read; an older marker on a busier pull request is not seen.
"""
from pr_slack_notify.services.github import GitHubClient
from pr_slack_notify.settings import Settings

COMMENTS_PAGE_SIZE = 100


def marker_text(settings: Settings) -> str:
    return f"Notification was sent to the #{settings.slack_channel} Slack channel."


async def already_notified(gh: GitHubClient, settings: Settings, pr_number: int) -> bool:
    settings.require_github()
    marker = marker_text(settings)
    comments = await gh.list_issue_comments(
        settings.repo_name, pr_number, per_page=COMMENTS_PAGE_SIZE
    )
    return any(c.get("body") == marker for c in comments)


async def record_notified(gh: GitHubClient, settings: Settings, pr_number: int) -> None:
    settings.require_github()
    await gh.post_issue_comment(settings.repo_name, pr_number, marker_text(settings))
    print(f"Recorded notification marker on PR #{pr_number}.")
