"""
Shared pytest fixtures.

Every test gets a fresh favorite store and an empty rate limiter so
that state never leaks between tests.
"""

from collections.abc import Callable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from banana_api.infrastructure.favorites.memory_store import InMemoryFavoriteStore
from banana_api.interfaces.favorites.dependencies import get_favorite_store
from banana_api.main import app, create_app
from banana_api.shared.security.policy import SecurityPolicy
from banana_api.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limiter() -> Iterator[None]:
    """Clear rate limit counters before each test."""
    limiter.reset()
    yield


@pytest.fixture
def favorite_store() -> Iterator[InMemoryFavoriteStore]:
    """A fresh in-memory store wired into the default application."""
    store = InMemoryFavoriteStore()
    app.dependency_overrides[get_favorite_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_favorite_store, None)


@pytest.fixture
def client(favorite_store: InMemoryFavoriteStore) -> TestClient:
    """Test client for the default application."""
    return TestClient(app)


@pytest.fixture
def make_client() -> Callable[[SecurityPolicy], TestClient]:
    """Factory building a client for an app with a custom security policy."""

    def _make(policy: SecurityPolicy) -> TestClient:
        custom: FastAPI = create_app(policy=policy)
        store = InMemoryFavoriteStore()
        custom.dependency_overrides[get_favorite_store] = lambda: store
        return TestClient(custom)

    return _make
