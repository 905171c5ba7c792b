"""
Server-rendered article page and its comment thread
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from fastapi import Request, status
from fastapi.templating import Jinja2Templates

from blog.config import WEB_DIR
from blog.models.user import Identity
from blog.web.api_client import ArticleApiClient
from blog.web.article_contents import ArticleContent, find_article_content

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))

UPVOTE_ICON = "https://cdn2.iconfinder.com/data/icons/essential-ui-1/32/thumbs-up-512.png"


class CommentList:
    """Renders an article's comments and submits new ones"""

    def __init__(
        self,
        comments: List[Dict[str, Any]],
        article_id: str,
        on_article_update: Callable[[Dict[str, Any]], None],
        user: Identity,
        api: ArticleApiClient,
    ):
        self.comments = comments
        self.article_id = article_id
        self.on_article_update = on_article_update
        self.user = user
        self.api = api

    async def add_comment(self, email: str, comment: str) -> Optional[Dict[str, Any]]:
        try:
            updated_article = await self.api.add_comment(self.article_id, email, comment)
        except httpx.HTTPStatusError as e:
            if e.response.status_code != status.HTTP_404_NOT_FOUND:
                raise
            logger.info("Comment on %s dropped, article is not persisted", self.article_id)
            return None
        self.on_article_update(updated_article)
        return updated_article

    def context(self) -> Dict[str, Any]:
        return {
            "comments": self.comments,
            "article_id": self.article_id,
            "user": self.user,
            "default_email": self.user.email if self.user else "",
        }


class ArticlePage:
    """
    One article: bundled title/body merged with upvotes and comments from the API.

    State starts as ``{"upvotes": 0, "comments": []}`` and is replaced wholesale
    by whatever the API returns, so the server stays the source of truth.
    """

    def __init__(self, article_id: str, api: ArticleApiClient, user: Identity = None):
        self.article_id = article_id
        self.api = api
        self.user = user
        self.article: Optional[ArticleContent] = find_article_content(article_id)
        self.article_info: Dict[str, Any] = {"upvotes": 0, "comments": []}

    def set_article_info(self, article_info: Dict[str, Any]) -> None:
        self.article_info = article_info

    @property
    def comment_list(self) -> CommentList:
        return CommentList(
            comments=self.article_info.get("comments", []),
            article_id=self.article_id,
            on_article_update=self.set_article_info,
            user=self.user,
            api=self.api,
        )

    async def load(self) -> None:
        """Fetch the article's engagement state once"""
        try:
            self.set_article_info(await self.api.get_article(self.article_id))
        except httpx.HTTPStatusError as e:
            if e.response.status_code != status.HTTP_404_NOT_FOUND:
                raise
            # No engagement document yet: keep the initial state
            logger.info("No engagement state for %s", self.article_id)

    async def add_upvote(self) -> None:
        try:
            self.set_article_info(await self.api.upvote(self.article_id))
        except httpx.HTTPStatusError as e:
            if e.response.status_code != status.HTTP_404_NOT_FOUND:
                raise
            logger.info("Upvote on %s dropped, article is not persisted", self.article_id)

    def render(self, request: Request):
        if self.article is None:
            return templates.TemplateResponse(
                request,
                "not_found.html",
                {"article_id": self.article_id, "user": self.user},
                status_code=status.HTTP_404_NOT_FOUND,
            )
        return templates.TemplateResponse(
            request,
            "article.html",
            {
                "article": self.article,
                "article_info": self.article_info,
                "user": self.user,
                "upvote_icon": UPVOTE_ICON,
                **self.comment_list.context(),
            },
        )
