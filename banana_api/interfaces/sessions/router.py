"""
FastAPI router issuing anonymous session tokens.

The token is returned in the body and set as a cookie. The cookie is
marked Secure when the security policy requires secure cookies.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from banana_api.core.config import settings
from banana_api.interfaces.schemas import CamelModel, ErrorResponse
from banana_api.shared.security.policy import SecurityPolicy
from banana_api.shared.security.rate_limiting import limiter
from banana_api.shared.security.tokens import generate_secure_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


class SessionData(CamelModel):
    """A freshly issued session identifier."""

    session_id: str


class SessionResponse(CamelModel):
    """Response schema for the session endpoint."""

    success: bool = True
    data: SessionData


def get_security_policy(request: Request) -> SecurityPolicy:
    """Return the policy snapshot loaded at application startup."""
    return request.app.state.security_policy


@router.post(
    "",
    response_model=SessionResponse,
    responses={429: {"model": ErrorResponse}},
    summary="Create session",
    description="Issue a random session identifier and set it as a cookie.",
)
@limiter.limit(settings.rate_limit_heavy)
def create_session(
    request: Request,
    response: Response,
    policy: SecurityPolicy = Depends(get_security_policy),
) -> SessionResponse:
    """Issue a new session token."""
    token = generate_secure_token()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_cookie_max_age,
        httponly=True,
        samesite="lax",
        secure=policy.secure_cookies,
    )
    logger.info("Issued new session (secure_cookie=%s)", policy.secure_cookies)
    return SessionResponse(data=SessionData(session_id=token))
