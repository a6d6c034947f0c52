from typing import Dict, Optional
import httpx


class SlackWebhookClient:
    """
    Posts plain-text messages to a Slack incoming webhook.
    The webhook answers with a bare "ok" body, so nothing is parsed back.
    """
    def __init__(
        self, webhook_url: str, transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.webhook_url = webhook_url
        self.transport = transport

    async def send(self, text: str, channel: str, username: str) -> None:
        payload: Dict[str, str] = {
            "text": text,
            "channel": f"#{channel}",
            "username": username,
        }
        async with httpx.AsyncClient(timeout=30, transport=self.transport) as client:
            r = await client.post(self.webhook_url, json=payload)
            r.raise_for_status()
