"""
HTTP middleware applied to every route
"""

import logging
import time

from fastapi import Request, Response, status

from blog.services import auth_service

logger = logging.getLogger(__name__)

AUTH_TOKEN_HEADER = "authtoken"


def read_auth_token(request: Request):
    """Token verified for this request, or None for anonymous requests"""
    return getattr(request.state, "auth_token", None)


async def authenticate_request(request: Request, call_next):
    """
    Attach the verified identity to ``request.state.user``.

    No token leaves the request anonymous (``None``). A header token that
    fails verification ends the request with an empty 400. Pages rendered by
    the server carry the token as a cookie instead; a cookie that fails
    verification leaves the request anonymous and is cleared on the response.
    """
    request.state.user = None
    request.state.auth_token = None
    stale_cookie = False

    header_token = request.headers.get(AUTH_TOKEN_HEADER)
    cookie_token = request.cookies.get(AUTH_TOKEN_HEADER)
    if header_token:
        try:
            request.state.user = await auth_service.verify_id_token(header_token)
        except auth_service.InvalidTokenError as e:
            logger.warning("Rejected auth token on %s: %s", request.url.path, e)
            return Response(status_code=status.HTTP_400_BAD_REQUEST)
        request.state.auth_token = header_token
    elif cookie_token:
        try:
            request.state.user = await auth_service.verify_id_token(cookie_token)
        except auth_service.InvalidTokenError as e:
            logger.info("Clearing stale auth cookie on %s: %s", request.url.path, e)
            stale_cookie = True
        else:
            request.state.auth_token = cookie_token

    if request.state.user is not None:
        logger.debug("Verified user %s", request.state.user.uid)

    response = await call_next(request)
    if stale_cookie:
        response.delete_cookie(AUTH_TOKEN_HEADER, path="/")
    return response


async def add_process_time_header(request: Request, call_next):
    """Add processing time to response headers"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response
