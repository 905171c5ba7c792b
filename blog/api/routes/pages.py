"""
Frontend routes: server-rendered pages and the app entry document

Every GET outside ``/api`` is answered here. ``/articles/{id}`` and
``/login`` are rendered on the server; any other path gets the bundled
entry document.
"""

import logging
from urllib.parse import quote

import httpx
from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, status
from fastapi.responses import FileResponse, RedirectResponse

from blog.config import settings
from blog.dependencies import get_optional_user
from blog.middleware import read_auth_token
from blog.models.user import Identity
from blog.web.api_client import ArticleApiClient
from blog.web.article_page import ArticlePage, templates

router = APIRouter(tags=["Frontend"])
logger = logging.getLogger(__name__)

INTERNAL_BASE_URL = "http://blog.internal"


async def get_api_client(request: Request):
    """
    API client for the page being rendered.

    Without ``API_BASE_URL`` the requests are served in-process by this app.
    """
    if settings.API_BASE_URL:
        client = httpx.AsyncClient(base_url=settings.API_BASE_URL)
    else:
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app),
            base_url=INTERNAL_BASE_URL,
        )
    async with client:
        yield ArticleApiClient(client, token=read_auth_token(request))


def _is_local_path(path: str) -> bool:
    return path.startswith("/") and not path.startswith("//")


def _article_path(article_id: str) -> str:
    return f"/articles/{quote(article_id, safe='')}"


def _login_redirect(article_id: str) -> RedirectResponse:
    return RedirectResponse(
        f"/login?next={_article_path(article_id)}", status_code=status.HTTP_303_SEE_OTHER
    )


def _article_redirect(article_id: str) -> RedirectResponse:
    # Form posts answer with a redirect so a refresh does not post again
    return RedirectResponse(_article_path(article_id), status_code=status.HTTP_303_SEE_OTHER)


@router.get("/articles/{article_id}")
async def article_page(
    article_id: str,
    request: Request,
    user: Identity = Depends(get_optional_user),
    api: ArticleApiClient = Depends(get_api_client),
):
    page = ArticlePage(article_id, api, user)
    if page.article is not None:
        await page.load()
    return page.render(request)


@router.post("/articles/{article_id}/upvote")
async def upvote_from_page(
    article_id: str,
    user: Identity = Depends(get_optional_user),
    api: ArticleApiClient = Depends(get_api_client),
):
    if user is None:
        return _login_redirect(article_id)
    page = ArticlePage(article_id, api, user)
    if page.article is not None:
        await page.add_upvote()
    return _article_redirect(article_id)


@router.post("/articles/{article_id}/comments")
async def comment_from_page(
    article_id: str,
    email: str = Form(...),
    comment: str = Form(...),
    user: Identity = Depends(get_optional_user),
    api: ArticleApiClient = Depends(get_api_client),
):
    if user is None:
        return _login_redirect(article_id)
    page = ArticlePage(article_id, api, user)
    if page.article is not None:
        await page.comment_list.add_comment(email, comment)
    return _article_redirect(article_id)


@router.get("/login")
async def login_page(request: Request, next_path: str = Query("/", alias="next")):
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "next": next_path if _is_local_path(next_path) else "/",
            "firebase_api_key": settings.FIREBASE_WEB_API_KEY,
            "firebase_auth_domain": settings.FIREBASE_AUTH_DOMAIN,
        },
    )


@router.get("/{full_path:path}", include_in_schema=False)
async def app_entry(full_path: str):
    """Entry document of the bundled frontend, for client-side routes"""
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    index_path = settings.frontend_index_path
    if not index_path.is_file():
        logger.error("Frontend entry document missing at %s", index_path)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return FileResponse(index_path, media_type="text/html")
