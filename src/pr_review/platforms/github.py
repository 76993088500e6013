from typing import Any
import httpx
from .base import GitPlatform
from pr_review.errors import UpstreamError


def split_repo(repo: str | None) -> tuple[str, str] | None:
    """``owner/name`` -> (owner, name), or None unless both parts are present."""
    owner, _, name = (repo or "").partition("/")
    if not owner or not name or "/" in name:
        return None
    return owner, name


class GitHubClient(GitPlatform):
    API_VERSION = "2022-11-28"

    def __init__(self, token: str, api_url: str = "https://api.github.com"):
        self.token = token
        self.api_url = api_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
        }

    async def create_review(
        self,
        repo: str,
        pr_number: int,
        commit_id: str,
        body: str,
        comments: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Create a COMMENT review on a pull request. ``repo`` is ``owner/name``."""
        parts = split_repo(repo)
        if parts is None:
            raise ValueError(f"Repository must be 'owner/name', got {repo!r}")
        owner, repo_name = parts
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.api_url}/repos/{owner}/{repo_name}/pulls/{pr_number}/reviews",
                headers=self._headers(),
                json={
                    "commit_id": commit_id,
                    "body": body,
                    "event": "COMMENT",
                    "comments": comments,
                },
                timeout=None,
            )
        if response.is_error:
            raise UpstreamError(f"GitHub API error {response.status_code}: {response.text}")
        return response.json()
