"""
Security policy loaded from the process environment.

The policy is an immutable snapshot built once at application startup
and handed to the header composer and the security middleware.
Loading never fails on malformed values: missing booleans are false,
missing strings fall back to documented defaults.
"""

import re
from dataclasses import dataclass
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HSTS_MAX_AGE = 31_536_000  # one year
DEFAULT_FRAME_OPTIONS = "DENY"
DEFAULT_CONTENT_TYPE_OPTIONS = "nosniff"
WILDCARD_ORIGIN = "*"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class SecurityPolicy:
    """Read-only security configuration for a process.

    Attributes:
        force_https: Send HSTS and redirect plain HTTP in production.
        hsts_max_age_seconds: Value of the HSTS max-age directive.
        csp_enabled: Attach the Content-Security-Policy header.
        frame_options: X-Frame-Options value (DENY, SAMEORIGIN).
        content_type_options_value: X-Content-Type-Options value.
        allowed_origins: Origins granted CORS access; may contain "*".
        cors_credentials_allowed: Send Access-Control-Allow-Credentials.
        secure_cookies: Mark cookies issued by the API as Secure.
    """

    force_https: bool = False
    hsts_max_age_seconds: int = DEFAULT_HSTS_MAX_AGE
    csp_enabled: bool = False
    frame_options: str = DEFAULT_FRAME_OPTIONS
    content_type_options_value: str = DEFAULT_CONTENT_TYPE_OPTIONS
    allowed_origins: tuple[str, ...] = ()
    cors_credentials_allowed: bool = False
    secure_cookies: bool = False


class SecuritySettings(BaseSettings):
    """Raw security environment variables.

    Every field is an optional string so that a malformed value is
    carried through to `load_policy` instead of failing validation.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    force_https: Optional[str] = None
    hsts_max_age: Optional[str] = None
    csp_enabled: Optional[str] = None
    x_frame_options: Optional[str] = None
    x_content_type_options: Optional[str] = None
    allowed_origins: Optional[str] = None
    cors_credentials: Optional[str] = None
    secure_cookies: Optional[str] = None


def _flag(value: Optional[str]) -> bool:
    return value == "true"


def _max_age(value: Optional[str]) -> int:
    if not value:
        return DEFAULT_HSTS_MAX_AGE
    match = _LEADING_INT.match(value)
    if match is None:
        return DEFAULT_HSTS_MAX_AGE
    return max(int(match.group(1)), 0)


def _origins(value: Optional[str]) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(value.split(","))


def load_policy(raw: Optional[SecuritySettings] = None) -> SecurityPolicy:
    """Build a SecurityPolicy from environment variables.

    Args:
        raw: Pre-loaded raw settings. Reads the environment when omitted.

    Returns:
        The immutable policy snapshot.
    """
    if raw is None:
        raw = SecuritySettings()

    return SecurityPolicy(
        force_https=_flag(raw.force_https),
        hsts_max_age_seconds=_max_age(raw.hsts_max_age),
        csp_enabled=_flag(raw.csp_enabled),
        frame_options=raw.x_frame_options or DEFAULT_FRAME_OPTIONS,
        content_type_options_value=(
            raw.x_content_type_options or DEFAULT_CONTENT_TYPE_OPTIONS
        ),
        allowed_origins=_origins(raw.allowed_origins),
        cors_credentials_allowed=_flag(raw.cors_credentials),
        secure_cookies=_flag(raw.secure_cookies),
    )
