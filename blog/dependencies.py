"""
FastAPI dependency injection for identity and services
"""

from fastapi import Depends, Request

from blog.exceptions import NotAuthenticatedError
from blog.models.user import AuthenticatedUser, Identity
from blog.services.article_service import ArticleService


def get_article_service(request: Request) -> ArticleService:
    """Article service opened in the application lifespan"""
    service = getattr(request.app.state, "article_service", None)
    if service is None:
        raise RuntimeError("Article service is not initialised")
    return service


async def get_optional_user(request: Request) -> Identity:
    """
    Identity attached by the authentication middleware

    Returns:
        The authenticated user, or None for anonymous requests
    """
    return getattr(request.state, "user", None)


async def get_current_user(
    user: Identity = Depends(get_optional_user),
) -> AuthenticatedUser:
    """
    Gate for mutating routes: requires an authenticated user with a uid

    Raises:
        NotAuthenticatedError: for anonymous requests (answered with 401)
    """
    if user is None or not user.uid:
        raise NotAuthenticatedError()
    return user
