"""
User key resolution for the favorite routes.

The user key buckets anonymous callers; it is NOT authentication.
Every caller sending the same User-Agent shares one bucket, so the
favorites are only as private as that header is unique.
"""

import base64
from abc import ABC, abstractmethod

from starlette.requests import Request

ANONYMOUS_USER_AGENT = "anonymous"
USER_KEY_LENGTH = 10


class UserKeyResolver(ABC):
    """Derives the favorites user key from an incoming request."""

    @abstractmethod
    def resolve(self, request: Request) -> str:
        """Return the user key for `request`."""
        raise NotImplementedError


class UserAgentKeyResolver(UserKeyResolver):
    """Keys callers by the first characters of their base64 User-Agent."""

    def resolve(self, request: Request) -> str:
        user_agent = request.headers.get("user-agent") or ANONYMOUS_USER_AGENT
        encoded = base64.b64encode(user_agent.encode("utf-8")).decode("ascii")
        return f"user_{encoded[:USER_KEY_LENGTH]}"


class SessionCookieKeyResolver(UserKeyResolver):
    """Keys callers by their session cookie, falling back to the User-Agent.

    Args:
        cookie_name: Name of the cookie issued by the sessions endpoint.
        fallback: Resolver used when the cookie is absent.
    """

    def __init__(self, cookie_name: str, fallback: UserKeyResolver) -> None:
        self._cookie_name = cookie_name
        self._fallback = fallback

    def resolve(self, request: Request) -> str:
        token = request.cookies.get(self._cookie_name)
        if token:
            return f"session_{token}"
        return self._fallback.resolve(request)
