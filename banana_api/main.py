"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (policy headers, CORS, origin checks)
- Rate limiting
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from banana_api.core.config import settings
from banana_api.interfaces.favorites.router import router as favorites_router
from banana_api.interfaces.health import router as health_router
from banana_api.interfaces.sessions.router import router as sessions_router
from banana_api.shared.errors.handlers import register_error_handlers
from banana_api.shared.logging import configure_logging
from banana_api.shared.security.middleware import SecurityMiddleware
from banana_api.shared.security.policy import SecurityPolicy, load_policy
from banana_api.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def create_app(policy: Optional[SecurityPolicy] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        policy: Security policy to enforce. Loaded from the environment
            when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, silent=settings.log_silent)

    if policy is None:
        policy = load_policy()
    logger.info(
        "Security policy loaded: force_https=%s, csp_enabled=%s, allowed_origins=%d",
        policy.force_https,
        policy.csp_enabled,
        len(policy.allowed_origins),
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.security_policy = policy

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(
        SecurityMiddleware,
        policy=policy,
        redirect_http=settings.is_production,
        max_body_bytes=settings.max_request_size_bytes,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(favorites_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")

    return app


app = create_app()
