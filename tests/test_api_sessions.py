"""
Tests for the session endpoint.

Validates token shape and cookie flags under different policies.
"""

from collections.abc import Callable

from fastapi.testclient import TestClient

from banana_api.core.config import settings
from banana_api.shared.security.policy import SecurityPolicy
from banana_api.shared.security.tokens import TOKEN_ALPHABET

MakeClient = Callable[[SecurityPolicy], TestClient]


class TestCreateSessionEndpoint:
    """Tests for POST /api/v1/sessions."""

    def test_issues_token(self, client: TestClient) -> None:
        """The body carries a 32-character alphanumeric session id."""
        response = client.post("/api/v1/sessions")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        session_id = body["data"]["sessionId"]
        assert len(session_id) == 32
        assert set(session_id) <= set(TOKEN_ALPHABET)

    def test_sets_http_only_cookie(self, client: TestClient) -> None:
        """The token is set as an HttpOnly cookie, not Secure by default."""
        response = client.post("/api/v1/sessions")
        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"{settings.session_cookie_name}=")
        assert response.json()["data"]["sessionId"] in cookie
        assert "httponly" in cookie.lower()
        assert "samesite=lax" in cookie.lower()
        assert "secure" not in cookie.lower()

    def test_secure_cookie_when_policy_requires(self, make_client: MakeClient) -> None:
        """The cookie is marked Secure under a secure-cookie policy."""
        client = make_client(SecurityPolicy(secure_cookies=True))
        response = client.post("/api/v1/sessions")
        assert "secure" in response.headers["set-cookie"].lower()

    def test_each_session_is_unique(self, client: TestClient) -> None:
        """Two sessions get different ids."""
        first = client.post("/api/v1/sessions").json()["data"]["sessionId"]
        second = client.post("/api/v1/sessions").json()["data"]["sessionId"]
        assert first != second


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self, client: TestClient) -> None:
        """Exceeding the session limit returns HTTP 429 with the error envelope."""
        limit = int(settings.rate_limit_heavy.split("/")[0])
        for _ in range(limit):
            assert client.post("/api/v1/sessions").status_code == 200
        response = client.post("/api/v1/sessions")
        assert response.status_code == 429
        assert response.json()["error"]["code"] == "RATE_LIMITED"
