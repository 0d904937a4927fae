"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the envelope
``{"success": false, "error": {"code": ..., "message": ...}}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from banana_api.domain.favorites.errors import (
    FavoriteStatusUnavailableError,
    FavoritesDomainError,
    MissingPromptIdError,
    ToggleFavoriteFailedError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_403 = 403
HTTP_413 = 413
HTTP_429 = 429
HTTP_500 = 500

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "服务器内部错误，请稍后重试"


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"code": code, "message": message}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(MissingPromptIdError)
    async def handle_missing_prompt_id(
        _request: Request, exc: MissingPromptIdError
    ) -> JSONResponse:
        """Handle requests that name no prompt."""
        logger.warning("Rejected request without prompt id")
        return error_response(HTTP_400, exc.code, exc.public_message)

    @app.exception_handler(ToggleFavoriteFailedError)
    async def handle_toggle_failed(
        _request: Request, exc: ToggleFavoriteFailedError
    ) -> JSONResponse:
        """Handle favorite store failures during a toggle."""
        logger.error("Toggle favorite failed: %s", exc.reason)
        return error_response(HTTP_500, exc.code, exc.public_message)

    @app.exception_handler(FavoriteStatusUnavailableError)
    async def handle_status_unavailable(
        _request: Request, exc: FavoriteStatusUnavailableError
    ) -> JSONResponse:
        """Handle favorite store failures during a status lookup."""
        logger.error("Get favorite status failed: %s", exc.reason)
        return error_response(HTTP_500, exc.code, exc.public_message)

    @app.exception_handler(FavoritesDomainError)
    async def handle_favorites_domain(
        _request: Request, exc: FavoritesDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled favorites domain errors."""
        logger.error("Unhandled favorites domain error: %s", exc.message)
        return error_response(HTTP_500, exc.code, exc.public_message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE)
