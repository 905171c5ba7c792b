"""
Pydantic schemas for request/response validation
"""

from blog.schemas.article import (
    ArticleListResponse,
    ArticleResponse,
    CommentCreateSchema,
)

__all__ = ["ArticleListResponse", "ArticleResponse", "CommentCreateSchema"]
