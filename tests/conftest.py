import copy
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from blog.dependencies import get_article_service
from blog.main import app
from blog.models.article import Article, Comment
from blog.models.user import AuthenticatedUser
from blog.services import auth_service


class InMemoryArticleService:
    """Stands in for the Firestore-backed ArticleService in HTTP tests"""

    def __init__(self, articles: Optional[List[Article]] = None):
        self.docs: Dict[str, Article] = {a.name: a for a in (articles or [])}
        self.calls: List[str] = []

    def snapshot(self) -> Dict[str, dict]:
        return {name: a.model_dump() for name, a in self.docs.items()}

    async def get_article(self, name):
        self.calls.append("get_article")
        article = self.docs.get(name)
        return copy.deepcopy(article) if article else None

    async def list_article_names(self):
        return sorted(self.docs)

    async def upvote_article(self, name, uid):
        self.calls.append("upvote_article")
        article = self.docs.get(name)
        if article is None:
            return None
        if article.can_upvote(uid):
            article.upvotes += 1
            article.upvoted_ids.append(uid)
        return copy.deepcopy(article)

    async def add_comment(self, name, username, comment):
        self.calls.append("add_comment")
        article = self.docs.get(name)
        if article is None:
            return None
        article.comments.append(Comment(username=username, comment=comment))
        return copy.deepcopy(article)

    async def create_article(self, name):
        if name in self.docs:
            return False
        self.docs[name] = Article(name=name)
        return True


USERS = {
    "token-u1": AuthenticatedUser(uid="u1", email="u1@example.com"),
    "token-u2": AuthenticatedUser(uid="u2", email="u2@example.com"),
}


async def fake_verify_id_token(id_token):
    if id_token not in USERS:
        raise auth_service.InvalidTokenError("Token expired")
    return USERS[id_token]


@pytest.fixture
def article_service():
    return InMemoryArticleService(
        [
            Article(name="learn-react", upvotes=5, upvoted_ids=["u1"]),
            Article(
                name="learn-node",
                comments=[Comment(username="first@example.com", comment="first!")],
            ),
        ]
    )


@pytest.fixture
def client(article_service, monkeypatch):
    """TestClient wired to the in-memory store and a fake identity provider"""
    monkeypatch.setattr(auth_service, "verify_id_token", fake_verify_id_token)
    app.dependency_overrides[get_article_service] = lambda: article_service
    yield TestClient(app)
    app.dependency_overrides = {}
