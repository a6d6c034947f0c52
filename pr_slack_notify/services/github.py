from typing import List, Dict, Optional
import httpx


class GitHubClient:
    def __init__(
        self,
        token: str,
        base_url: str = "https://api.github.com",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.token}",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=30, transport=self.transport)

    async def list_issue_comments(
        self, repo: str, issue_number: int, per_page: int = 100
    ) -> List[Dict]:
        """
        First page only of the comments on an issue/PR. `repo` is 'owner/name'.
        """
        url = f"{self.base_url}/repos/{repo}/issues/{issue_number}/comments"
        async with self._client() as client:
            r = await client.get(
                url, headers=self._headers(), params={"per_page": per_page}
            )
            r.raise_for_status()
            return r.json()

    async def post_issue_comment(self, repo: str, issue_number: int, body: str) -> Dict:
        # PRs are issues under the hood; this posts a single top-level comment to the PR
        url = f"{self.base_url}/repos/{repo}/issues/{issue_number}/comments"
        async with self._client() as client:
            r = await client.post(url, headers=self._headers(), json={"body": body})
            r.raise_for_status()
            return r.json()
