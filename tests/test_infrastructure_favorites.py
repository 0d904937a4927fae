"""
Tests for favorite store adapters.

The SQL store runs against a temporary SQLite database.
"""

import threading
from pathlib import Path

import pytest
from sqlalchemy import create_engine

from banana_api.infrastructure.favorites.memory_store import InMemoryFavoriteStore
from banana_api.infrastructure.favorites.sql_store import SqlFavoriteStore


class TestInMemoryFavoriteStore:
    """Tests for InMemoryFavoriteStore."""

    def test_toggle_returns_new_status(self) -> None:
        """Toggle adds, then removes."""
        store = InMemoryFavoriteStore()
        assert store.toggle("u", "p") is True
        assert store.contains("u", "p") is True
        assert store.toggle("u", "p") is False
        assert store.get("u") == frozenset()

    def test_get_never_creates_user(self) -> None:
        """Reading an unknown user leaves the key set empty."""
        store = InMemoryFavoriteStore()
        assert store.get("ghost") == frozenset()
        assert store.contains("ghost", "p") is False
        assert store.user_keys() == frozenset()

    def test_returned_set_is_a_snapshot(self) -> None:
        """A set returned by get is not affected by later toggles."""
        store = InMemoryFavoriteStore()
        store.toggle("u", "a")
        snapshot = store.get("u")
        store.toggle("u", "b")
        assert snapshot == frozenset({"a"})
        assert store.get("u") == frozenset({"a", "b"})

    def test_concurrent_toggles_do_not_lose_updates(self) -> None:
        """Parallel toggles of distinct prompts for one user all land."""
        store = InMemoryFavoriteStore()
        prompt_ids = [str(i) for i in range(200)]
        barrier = threading.Barrier(8)

        def worker(chunk: list[str]) -> None:
            barrier.wait()
            for prompt_id in chunk:
                store.toggle("shared", prompt_id)

        threads = [
            threading.Thread(target=worker, args=(prompt_ids[i::8],)) for i in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.get("shared") == frozenset(prompt_ids)


class TestSqlFavoriteStore:
    """Tests for SqlFavoriteStore."""

    @pytest.fixture
    def db_url(self, tmp_path: Path) -> str:
        return f"sqlite:///{tmp_path / 'favorites.db'}"

    def test_toggle_and_read(self, db_url: str) -> None:
        """Rows are inserted and deleted by toggle."""
        store = SqlFavoriteStore(create_engine(db_url))
        assert store.toggle("u", "1") is True
        assert store.toggle("u", "2") is True
        assert store.get("u") == frozenset({"1", "2"})
        assert store.contains("u", "1") is True
        assert store.toggle("u", "1") is False
        assert store.get("u") == frozenset({"2"})

    def test_unknown_user_has_no_favorites(self, db_url: str) -> None:
        """An unknown user reads as empty."""
        store = SqlFavoriteStore(create_engine(db_url))
        assert store.get("ghost") == frozenset()
        assert store.contains("ghost", "1") is False

    def test_favorites_survive_a_new_store(self, db_url: str) -> None:
        """Favorites persist across store instances on the same database."""
        SqlFavoriteStore(create_engine(db_url)).toggle("u", "9")
        reopened = SqlFavoriteStore(create_engine(db_url))
        assert reopened.contains("u", "9") is True
