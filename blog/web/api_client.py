"""
HTTP client the frontend uses to reach the articles API
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from blog.middleware import AUTH_TOKEN_HEADER


def article_url(name: str, action: str = "") -> str:
    url = f"/api/articles/{quote(name, safe='')}"
    return f"{url}/{action}" if action else url


class ArticleApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` forwarding the user's token"""

    def __init__(self, client: httpx.AsyncClient, token: Optional[str] = None):
        self.client = client
        self.token = token

    def _headers(self) -> Dict[str, str]:
        return {AUTH_TOKEN_HEADER: self.token} if self.token else {}

    async def _send(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        response = await self.client.request(method, url, headers=self._headers(), **kwargs)
        response.raise_for_status()
        return response.json()

    async def get_article(self, name: str) -> Dict[str, Any]:
        return await self._send("GET", article_url(name))

    async def upvote(self, name: str) -> Dict[str, Any]:
        return await self._send("PUT", article_url(name, "upvote"))

    async def add_comment(self, name: str, email: str, comment: str) -> Dict[str, Any]:
        return await self._send(
            "POST",
            article_url(name, "comments"),
            json={"email": email, "comment": comment},
        )
