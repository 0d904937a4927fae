"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
Security header settings live in `banana_api.shared.security.policy`
because they are read as raw strings and never fail on format.
"""

from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        environment: Deployment environment name ("development", "production").
            Also read from NODE_ENV, shared with the front-end build.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_silent: Drop all log output (production console suppression).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for compute-heavy endpoints.
        max_request_size_bytes: Maximum allowed request body size.
        favorites_database_url: SQLAlchemy URL for persistent favorites.
            When unset, favorites live in process memory.
        favorites_identity: Which resolver derives the favorites user key.
        session_cookie_name: Cookie carrying the anonymous session token.
        session_cookie_max_age: Session cookie lifetime in seconds.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "BananaEditor API"
    version: str = "0.1.0"
    debug: bool = False
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
    )
    log_level: str = "INFO"
    log_silent: bool = False
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"
    max_request_size_bytes: int = Field(
        default=10_485_760,  # 10 MB
        validation_alias=AliasChoices("max_request_size_bytes", "max_file_size"),
    )

    favorites_database_url: Optional[str] = None
    favorites_identity: Literal["user-agent", "session"] = "user-agent"

    session_cookie_name: str = "session_id"
    session_cookie_max_age: int = 7 * 24 * 3600

    @property
    def is_production(self) -> bool:
        """Return True when running in the production environment."""
        return self.environment.lower() == "production"


settings = Settings()
