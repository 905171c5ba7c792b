"""Articles API routes"""

import logging

from fastapi import APIRouter, Depends

from blog.dependencies import get_article_service, get_current_user, get_optional_user
from blog.exceptions import ArticleNotFoundError
from blog.models.user import AuthenticatedUser, Identity
from blog.schemas.article import (
    ArticleListResponse,
    ArticleResponse,
    CommentCreateSchema,
)
from blog.services.article_service import ArticleService


router = APIRouter(prefix="/api/articles", tags=["Articles"])
logger = logging.getLogger(__name__)


def _uid(user: Identity):
    return user.uid if user else None


@router.get("", response_model=ArticleListResponse)
async def list_articles(service: ArticleService = Depends(get_article_service)):
    """Names of all persisted articles"""
    return ArticleListResponse(articles=await service.list_article_names())


@router.get("/{name}", response_model=ArticleResponse)
async def get_article(
    name: str,
    current_user: Identity = Depends(get_optional_user),
    service: ArticleService = Depends(get_article_service),
):
    """Fetch an article; ``canUpvote`` reflects the caller's identity"""
    article = await service.get_article(name)
    if article is None:
        raise ArticleNotFoundError(name)
    return ArticleResponse.for_user(article, _uid(current_user))


@router.put("/{name}/upvote", response_model=ArticleResponse)
async def upvote_article(
    name: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: ArticleService = Depends(get_article_service),
):
    """
    Upvote once per user. Repeated upvotes return the article unchanged.
    """
    article = await service.upvote_article(name, current_user.uid)
    if article is None:
        raise ArticleNotFoundError(name)
    return ArticleResponse.for_user(article, current_user.uid)


@router.post("/{name}/comments", response_model=ArticleResponse)
async def add_comment(
    name: str,
    payload: CommentCreateSchema,
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: ArticleService = Depends(get_article_service),
):
    # the comment is attributed to the email in the body, not to current_user
    article = await service.add_comment(name, payload.email, payload.comment)
    if article is None:
        raise ArticleNotFoundError(name)
    logger.info("Comment added to %s by %s", name, current_user.uid)
    return ArticleResponse.for_user(article, current_user.uid)
