"""
Security and CORS header composition.

Pure functions that turn a SecurityPolicy into response headers:
- Strict-Transport-Security (when HTTPS is forced)
- Content-Security-Policy (when CSP is enabled)
- X-Frame-Options, X-Content-Type-Options
- X-XSS-Protection, Referrer-Policy, Permissions-Policy
- Access-Control-* for allowed origins

No business logic. Responses are copied, never mutated.
"""

from typing import Mapping, Optional

from starlette.datastructures import MutableHeaders
from starlette.responses import Response, StreamingResponse

from banana_api.shared.security.policy import WILDCARD_ORIGIN, SecurityPolicy

CSP_DIRECTIVES = (
    "default-src 'self'",
    "script-src 'self' 'unsafe-inline' 'unsafe-eval'",
    "style-src 'self' 'unsafe-inline' https://fonts.googleapis.com",
    "font-src 'self' https://fonts.gstatic.com",
    "img-src 'self' data: blob: https:",
    "connect-src 'self' https://generativelanguage.googleapis.com",
    "media-src 'self' blob:",
    "object-src 'none'",
    "base-uri 'self'",
    "form-action 'self'",
    "frame-ancestors 'none'",
    "upgrade-insecure-requests",
)

FIXED_SECURITY_HEADERS = {
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}

CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type, Authorization, X-Requested-With"
CORS_MAX_AGE = "86400"


def build_csp() -> str:
    """Return the Content-Security-Policy header value.

    The directive list is fixed; it does not depend on the policy.
    """
    return "; ".join(CSP_DIRECTIVES)


def security_headers(policy: SecurityPolicy) -> dict[str, str]:
    """Return the security headers the policy requires on every response."""
    headers: dict[str, str] = {}
    if policy.force_https:
        headers["Strict-Transport-Security"] = (
            f"max-age={policy.hsts_max_age_seconds}; includeSubDomains; preload"
        )
    if policy.csp_enabled:
        headers["Content-Security-Policy"] = build_csp()
    headers["X-Frame-Options"] = policy.frame_options
    headers["X-Content-Type-Options"] = policy.content_type_options_value
    headers.update(FIXED_SECURITY_HEADERS)
    return headers


def build_cors_headers(
    origin: Optional[str], policy: SecurityPolicy
) -> dict[str, str]:
    """Return the CORS headers granted to `origin`.

    The origin is echoed back when it is explicitly allowed, replaced by
    "*" when only the wildcard matches, and omitted otherwise.
    """
    headers: dict[str, str] = {}
    if origin and origin in policy.allowed_origins:
        headers["Access-Control-Allow-Origin"] = origin
    elif WILDCARD_ORIGIN in policy.allowed_origins:
        headers["Access-Control-Allow-Origin"] = WILDCARD_ORIGIN

    headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
    headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
    if policy.cors_credentials_allowed:
        headers["Access-Control-Allow-Credentials"] = "true"
    headers["Access-Control-Max-Age"] = CORS_MAX_AGE
    return headers


def with_headers(response: Response, extra: Mapping[str, str]) -> Response:
    """Return a copy of `response` with `extra` headers set on it.

    Status, body and background task carry over unchanged; the original
    response and its header list are left untouched.
    """
    headers = MutableHeaders(raw=list(response.raw_headers))
    for name, value in extra.items():
        headers[name] = value

    background = getattr(response, "background", None)
    body_iterator = getattr(response, "body_iterator", None)
    if body_iterator is not None:
        copy: Response = StreamingResponse(
            body_iterator, status_code=response.status_code, background=background
        )
    else:
        copy = Response(
            content=response.body,
            status_code=response.status_code,
            background=background,
        )
    copy.raw_headers = headers.raw
    return copy


def apply_security_headers(response: Response, policy: SecurityPolicy) -> Response:
    """Return a copy of `response` carrying the policy's security headers."""
    return with_headers(response, security_headers(policy))
