"""
Tests for the favorite API endpoints.

Tests FastAPI routes end to end with an in-memory store.
Validates response envelopes, status codes and error mapping.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from banana_api.domain.favorites.ports import FavoriteStore
from banana_api.infrastructure.favorites.memory_store import InMemoryFavoriteStore
from banana_api.interfaces.favorites.dependencies import (
    get_favorite_store,
    get_user_key_resolver,
)
from banana_api.interfaces.favorites.identity import (
    SessionCookieKeyResolver,
    UserAgentKeyResolver,
    UserKeyResolver,
)
from banana_api.main import app


def _request(headers: dict[str, str]) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in headers.items()]
    return Request({"type": "http", "headers": raw})


@pytest.fixture
def broken_store():
    """Wire a store whose every call fails."""
    store = MagicMock(spec=FavoriteStore)
    store.toggle.side_effect = RuntimeError("backend down")
    store.contains.side_effect = RuntimeError("backend down")
    app.dependency_overrides[get_favorite_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_favorite_store, None)


@pytest.fixture
def failing_resolver(favorite_store: InMemoryFavoriteStore):
    """Wire a user key resolver that always fails."""
    resolver = MagicMock(spec=UserKeyResolver)
    resolver.resolve.side_effect = RuntimeError("header parsing blew up")
    app.dependency_overrides[get_user_key_resolver] = lambda: resolver
    yield resolver
    app.dependency_overrides.pop(get_user_key_resolver, None)


class TestToggleFavoriteEndpoint:
    """Tests for POST /api/v1/prompts/{id}/favorite."""

    def test_first_toggle_adds_favorite(self, client: TestClient) -> None:
        """With no prior state the prompt becomes a favorite."""
        response = client.post("/api/v1/prompts/42/favorite")
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {"promptId": "42", "isFavorite": True, "message": "已添加到收藏"},
        }

    def test_second_toggle_removes_favorite(self, client: TestClient) -> None:
        """An identical second request removes the favorite."""
        client.post("/api/v1/prompts/42/favorite")
        response = client.post("/api/v1/prompts/42/favorite")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["isFavorite"] is False
        assert data["message"] == "已从收藏中移除"

    def test_empty_id_returns_missing_id(self, client: TestClient) -> None:
        """An empty id segment is rejected with 400 MISSING_ID."""
        response = client.post("/api/v1/prompts//favorite")
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {"code": "MISSING_ID", "message": "缺少提示词ID"},
        }

    def test_store_untouched_on_missing_id(
        self, client: TestClient, favorite_store: InMemoryFavoriteStore
    ) -> None:
        """A rejected request does not create a store entry."""
        client.post("/api/v1/prompts//favorite")
        assert favorite_store.user_keys() == frozenset()

    def test_store_failure_returns_500(self, broken_store: MagicMock) -> None:
        """Unexpected store errors map to TOGGLE_FAVORITE_FAILED."""
        response = TestClient(app).post("/api/v1/prompts/1/favorite")
        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"code": "TOGGLE_FAVORITE_FAILED", "message": "操作失败，请稍后重试"},
        }
        assert "backend down" not in response.text

    def test_identity_failure_returns_500(self, failing_resolver: MagicMock) -> None:
        """Failures outside the store still map to TOGGLE_FAVORITE_FAILED."""
        response = TestClient(app).post("/api/v1/prompts/1/favorite")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "TOGGLE_FAVORITE_FAILED"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "blew up" not in response.text

    def test_different_user_agents_are_isolated(self, client: TestClient) -> None:
        """Favorites are bucketed per User-Agent."""
        client.post("/api/v1/prompts/5/favorite", headers={"User-Agent": "alpha-browser"})
        response = client.get(
            "/api/v1/prompts/5/favorite", headers={"User-Agent": "bravo-browser"}
        )
        assert response.json()["data"]["isFavorite"] is False

    def test_user_agents_sharing_a_prefix_share_favorites(
        self, client: TestClient
    ) -> None:
        """Only the first seven bytes of the User-Agent distinguish callers."""
        client.post("/api/v1/prompts/5/favorite", headers={"User-Agent": "browser-a"})
        response = client.get(
            "/api/v1/prompts/5/favorite", headers={"User-Agent": "browser-b"}
        )
        assert response.json()["data"]["isFavorite"] is True


class TestGetFavoriteStatusEndpoint:
    """Tests for GET /api/v1/prompts/{id}/favorite."""

    def test_status_reflects_toggle(self, client: TestClient) -> None:
        """A toggled prompt reads back as favorite."""
        client.post("/api/v1/prompts/3/favorite")
        response = client.get("/api/v1/prompts/3/favorite")
        assert response.status_code == 200
        assert response.json()["data"] == {
            "promptId": "3",
            "isFavorite": True,
            "message": "已收藏",
        }

    def test_unknown_prompt_is_not_favorite(self, client: TestClient) -> None:
        """An untouched prompt reads as not favorite."""
        response = client.get("/api/v1/prompts/3/favorite")
        assert response.json()["data"]["isFavorite"] is False
        assert response.json()["data"]["message"] == "未收藏"

    def test_cache_control_header(self, client: TestClient) -> None:
        """Successful reads are privately cacheable for a minute."""
        response = client.get("/api/v1/prompts/3/favorite")
        assert response.headers["Cache-Control"] == "private, max-age=60"

    def test_read_does_not_create_user(
        self, client: TestClient, favorite_store: InMemoryFavoriteStore
    ) -> None:
        """Reading never adds the caller to the store."""
        for _ in range(3):
            client.get("/api/v1/prompts/3/favorite")
        assert favorite_store.user_keys() == frozenset()

    def test_empty_id_returns_missing_id(self, client: TestClient) -> None:
        """An empty id segment is rejected with 400 MISSING_ID."""
        response = client.get("/api/v1/prompts//favorite")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_ID"

    def test_store_failure_returns_500(self, broken_store: MagicMock) -> None:
        """Unexpected store errors map to GET_FAVORITE_STATUS_FAILED."""
        response = TestClient(app).get("/api/v1/prompts/1/favorite")
        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "GET_FAVORITE_STATUS_FAILED",
            "message": "获取收藏状态失败，请稍后重试",
        }

    def test_identity_failure_returns_500(self, failing_resolver: MagicMock) -> None:
        """Failures outside the store still map to GET_FAVORITE_STATUS_FAILED."""
        response = TestClient(app).get("/api/v1/prompts/1/favorite")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "GET_FAVORITE_STATUS_FAILED"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestUserKeyResolvers:
    """Tests for identity resolution."""

    def test_user_agent_key_is_deterministic(self) -> None:
        """The same User-Agent always maps to the same key."""
        resolver = UserAgentKeyResolver()
        first = resolver.resolve(_request({"User-Agent": "Mozilla/5.0"}))
        second = resolver.resolve(_request({"User-Agent": "Mozilla/5.0"}))
        assert first == second == "user_TW96aWxsYS"

    def test_missing_user_agent_is_anonymous(self) -> None:
        """Requests without a User-Agent share the anonymous bucket."""
        assert UserAgentKeyResolver().resolve(_request({})) == "user_YW5vbnltb3"

    def test_session_cookie_takes_precedence(self) -> None:
        """The session cookie identifies the caller when present."""
        resolver = SessionCookieKeyResolver("session_id", fallback=UserAgentKeyResolver())
        request = _request({"Cookie": "session_id=abc123", "User-Agent": "Mozilla/5.0"})
        assert resolver.resolve(request) == "session_abc123"

    def test_session_resolver_falls_back(self) -> None:
        """Without the cookie the fallback resolver is used."""
        resolver = SessionCookieKeyResolver("session_id", fallback=UserAgentKeyResolver())
        assert resolver.resolve(_request({"User-Agent": "Mozilla/5.0"})) == "user_TW96aWxsYS"
