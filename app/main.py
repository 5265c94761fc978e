"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.config import Settings, get_settings
from app.exceptions import (
    GistNotFoundError,
    GitHubAPIError,
    catch_unhandled_errors,
    gist_not_found_handler,
    github_api_error_handler,
    request_validation_handler,
)
from app.routers import gists, revisions
from app.services.github_client import GitHubClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

github_client: GitHubClient | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared GitHub client on startup and close it on shutdown."""
    global github_client

    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name}")

    github_client = GitHubClient(settings)
    await github_client.start()

    yield

    logger.info("Shutting down GitHub client")
    await github_client.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="A sanitizing proxy for the GitHub Gists API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(GistNotFoundError, gist_not_found_handler)
    app.add_exception_handler(GitHubAPIError, github_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.middleware("http")(catch_unhandled_errors)

    async def get_github_client_dep():
        return github_client

    app.dependency_overrides[gists.get_github_client] = get_github_client_dep
    app.include_router(gists.router)

    if settings.expose_revision_routes:
        logger.info("Revision routes enabled")
        app.dependency_overrides[revisions.get_github_client] = get_github_client_dep
        app.include_router(revisions.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
