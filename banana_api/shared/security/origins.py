"""Origin allow-list check."""

from typing import Optional

from banana_api.shared.security.policy import WILDCARD_ORIGIN, SecurityPolicy


def is_origin_allowed(origin: Optional[str], policy: SecurityPolicy) -> bool:
    """Return True if `origin` may make cross-origin requests.

    A missing or empty origin is never allowed. Otherwise the origin must
    be an exact member of the allow-list, or the list must contain "*".
    """
    if not origin:
        return False
    return origin in policy.allowed_origins or WILDCARD_ORIGIN in policy.allowed_origins
