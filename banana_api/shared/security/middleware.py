"""
Security middleware.

Runs on every request, in order:
1. Redirects plain HTTP to HTTPS when the policy forces HTTPS.
2. Answers CORS preflight (OPTIONS) requests directly.
3. Rejects requests from origins outside the allow-list.
4. Rejects request bodies above the configured size limit.
5. Adds security headers (and CORS headers for cross-origin
   requests) to the downstream response.

No business logic. Pure cross-cutting concern.
"""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from banana_api.shared.errors.handlers import HTTP_403, HTTP_413, error_response
from banana_api.shared.security.headers import (
    apply_security_headers,
    build_cors_headers,
    with_headers,
)
from banana_api.shared.security.origins import is_origin_allowed
from banana_api.shared.security.policy import SecurityPolicy

logger = logging.getLogger(__name__)

INVALID_ORIGIN_MESSAGE = "请求来源不被允许"


class SecurityMiddleware(BaseHTTPMiddleware):
    """Middleware enforcing the process SecurityPolicy.

    Args:
        app: The wrapped ASGI application.
        policy: Policy snapshot loaded at startup.
        redirect_http: Allow the HTTP to HTTPS redirect. Only enabled
            in production so local development keeps working over HTTP.
        max_body_bytes: Largest accepted Content-Length, or None.
    """

    def __init__(
        self,
        app: ASGIApp,
        policy: SecurityPolicy,
        redirect_http: bool = False,
        max_body_bytes: Optional[int] = None,
    ) -> None:
        super().__init__(app)
        self._policy = policy
        self._redirect_http = redirect_http
        self._max_body_bytes = max_body_bytes

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Apply the security policy around the downstream handler."""
        origin = request.headers.get("origin")

        if self._should_redirect(request):
            https_url = request.url.replace(scheme="https")
            return RedirectResponse(str(https_url), status_code=301)

        if request.method == "OPTIONS":
            return Response(
                status_code=200, headers=build_cors_headers(origin, self._policy)
            )

        if origin and not is_origin_allowed(origin, self._policy):
            logger.warning("Rejected request from disallowed origin: %s", origin)
            return error_response(HTTP_403, "INVALID_ORIGIN", INVALID_ORIGIN_MESSAGE)

        if self._too_large(request):
            limit_mb = round(self._max_body_bytes / 1024 / 1024)
            logger.warning("Rejected oversized request to %s", request.url.path)
            return error_response(
                HTTP_413, "PAYLOAD_TOO_LARGE", f"请求体大小超过限制 ({limit_mb}MB)"
            )

        response = await call_next(request)
        response = apply_security_headers(response, self._policy)
        if origin:
            response = with_headers(response, build_cors_headers(origin, self._policy))
        return response

    def _should_redirect(self, request: Request) -> bool:
        return (
            self._redirect_http
            and self._policy.force_https
            and request.url.scheme == "http"
        )

    def _too_large(self, request: Request) -> bool:
        if self._max_body_bytes is None:
            return False
        content_length = request.headers.get("content-length")
        if not content_length:
            return False
        try:
            return int(content_length) > self._max_body_bytes
        except ValueError:
            return False
