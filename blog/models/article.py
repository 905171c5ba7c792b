"""
Article model and Firestore conversion helpers
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class Comment(BaseModel):
    username: str
    comment: str


class Article(BaseModel):
    """
    Engagement state of an article as stored in Firestore

    Collection: articles/
    Document ID: name
    """

    name: str
    upvotes: int = Field(0, ge=0)
    upvoted_ids: list[str] = Field(default_factory=list, alias="upvotedIds")
    comments: list[Comment] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def can_upvote(self, uid: Optional[str]) -> bool:
        """True when uid is known and has not upvoted this article yet"""
        return bool(uid) and uid not in self.upvoted_ids


def firestore_article_to_model(doc: dict, doc_id: str) -> Article:
    # documents created out of band may carry only some of the fields
    data = {k: v for k, v in doc.items() if v is not None}
    data.setdefault("name", doc_id)
    return Article.model_validate(data)


def article_model_to_firestore(article: Article) -> dict:
    return article.model_dump(by_alias=True)
