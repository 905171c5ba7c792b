"""
Article request/response schemas
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from blog.models.article import Article, Comment


class CommentCreateSchema(BaseModel):
    email: str = Field(..., description="Shown as the comment's username")
    comment: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "a@b.com", "comment": "nice"}
        }
    )


class ArticleResponse(BaseModel):
    name: str
    upvotes: int = 0
    upvoted_ids: list[str] = Field(default_factory=list, alias="upvotedIds")
    comments: list[Comment] = Field(default_factory=list)
    can_upvote: bool = Field(False, alias="canUpvote")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def for_user(cls, article: Article, uid: Optional[str]) -> "ArticleResponse":
        return cls(
            name=article.name,
            upvotes=article.upvotes,
            upvoted_ids=list(article.upvoted_ids),
            comments=list(article.comments),
            can_upvote=article.can_upvote(uid),
        )


class ArticleListResponse(BaseModel):
    articles: list[str]
