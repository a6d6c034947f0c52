import asyncio
import json

import httpx
import pytest

from pr_slack_notify.services.github import GitHubClient
from pr_slack_notify.services.slack import SlackWebhookClient


def test_list_issue_comments_reads_first_page_only():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=[{"body": "hi"}])

    gh = GitHubClient(token="ghs_mock", transport=httpx.MockTransport(handler))
    comments = asyncio.run(gh.list_issue_comments("owner/repo", 3))

    assert comments == [{"body": "hi"}]
    assert len(calls) == 1
    req = calls[0]
    assert req.method == "GET"
    assert req.url.path == "/repos/owner/repo/issues/3/comments"
    assert req.url.params["per_page"] == "100"
    assert req.headers["Authorization"] == "Bearer ghs_mock"
    assert req.headers["Accept"] == "application/vnd.github+json"
    assert req.headers["X-GitHub-Api-Version"] == "2022-11-28"


def test_post_issue_comment_sends_literal_body():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(201, json={"id": 7})

    gh = GitHubClient(
        token="t",
        base_url="https://ghe.example/api/v3/",
        transport=httpx.MockTransport(handler),
    )
    out = asyncio.run(gh.post_issue_comment("owner/repo", 4, "marker"))

    assert out == {"id": 7}
    req = calls[0]
    assert req.method == "POST"
    assert str(req.url) == "https://ghe.example/api/v3/repos/owner/repo/issues/4/comments"
    assert json.loads(req.content) == {"body": "marker"}


def test_github_error_status_raises():
    gh = GitHubClient(
        token="t", transport=httpx.MockTransport(lambda r: httpx.Response(403, json={}))
    )
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(gh.list_issue_comments("owner/repo", 1))


def test_slack_send_payload_shape():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, text="ok")

    slack = SlackWebhookClient(
        "https://hooks.example/T/B/X", transport=httpx.MockTransport(handler)
    )
    asyncio.run(slack.send(text="hello", channel="general", username="Bot"))

    req = calls[0]
    assert req.method == "POST"
    assert str(req.url) == "https://hooks.example/T/B/X"
    assert json.loads(req.content) == {
        "text": "hello",
        "channel": "#general",
        "username": "Bot",
    }


def test_slack_error_status_raises():
    slack = SlackWebhookClient(
        "https://hooks.example/x",
        transport=httpx.MockTransport(lambda r: httpx.Response(404, text="no_service")),
    )
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(slack.send(text="x", channel="c", username="u"))
