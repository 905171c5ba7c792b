"""
Blog Backend - Main FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from blog.api.routes import articles, pages
from blog.config import settings
from blog.exceptions import ArticleNotFoundError, NotAuthenticatedError
from blog.middleware import add_process_time_header, authenticate_request
from blog.services.article_service import ArticleService
from blog.services.firebase_service import FirebaseService

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No matching article found!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the Firestore connection once and share it across requests"""
    logger.info("Starting %s v%s", settings.APP_NAME, settings.APP_VERSION)

    firebase = FirebaseService(settings).open()
    app.state.firebase = firebase
    app.state.article_service = ArticleService(
        firebase.db, settings.ARTICLES_COLLECTION
    )
    logger.info("Database connection is established.")

    yield

    logger.info("Shutting down %s", settings.APP_NAME)
    app.state.article_service = None
    firebase.close()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Blog API - article upvotes and comments",
    docs_url="/api/docs",
    redoc_url=None,
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)


# Last registered runs first: CORS, timing, then authentication
app.middleware("http")(authenticate_request)
app.middleware("http")(add_process_time_header)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ArticleNotFoundError)
async def article_not_found_handler(request: Request, exc: ArticleNotFoundError):
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(NotAuthenticatedError)
async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError):
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "message": str(exc) if settings.DEBUG else "An error occurred",
        },
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness probe"""
    return {"status": "ok"}


app.include_router(articles.router)
# Catch-all frontend routes go last
app.include_router(pages.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG
    )
