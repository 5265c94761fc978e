"""Custom exceptions and FastAPI exception handlers."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Gist not found"
GENERIC_ERROR_MESSAGE = "Something went wrong"


class GistNotFoundError(Exception):
    """Raised when GitHub reports that a gist or revision doesn't exist."""

    def __init__(self, gist_id: str):
        self.gist_id = gist_id
        super().__init__(f"Gist '{gist_id}' not found")


class GitHubAPIError(Exception):
    """Raised for any other failed exchange with the GitHub API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"GitHub API error ({status_code}): {message}")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


async def gist_not_found_handler(
    request: Request,
    exc: GistNotFoundError,
) -> JSONResponse:
    """Handle GistNotFoundError."""
    return _error_response(404, NOT_FOUND_MESSAGE)


async def github_api_error_handler(
    request: Request,
    exc: GitHubAPIError,
) -> JSONResponse:
    """Handle GitHubAPIError."""
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return _error_response(500, GENERIC_ERROR_MESSAGE)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle malformed request bodies with the generic failure envelope."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return _error_response(500, GENERIC_ERROR_MESSAGE)


async def catch_unhandled_errors(request: Request, call_next) -> Response:
    """
    Middleware turning any exception no handler claimed into the 500 envelope.

    The exception is logged here and not re-raised to the server.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(500, GENERIC_ERROR_MESSAGE)
