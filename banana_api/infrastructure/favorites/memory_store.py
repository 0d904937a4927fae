"""
Adapter: Process-local favorite store.

Implements the FavoriteStore port with a dict of immutable sets.
Contents live for the lifetime of the process and are not shared
between worker processes.
"""

import threading

from banana_api.domain.favorites.ports import FavoriteStore


class InMemoryFavoriteStore(FavoriteStore):
    """Favorite store backed by a dict of frozensets.

    Each toggle replaces the user's set under a lock, so concurrent
    toggles within one process never lose an update. Reads take the
    current set without locking; a frozenset is never modified in place.
    """

    def __init__(self) -> None:
        self._favorites: dict[str, frozenset[str]] = {}
        self._lock = threading.Lock()

    def get(self, user_key: str) -> frozenset[str]:
        """Return the favorites of `user_key`, empty for unknown users."""
        return self._favorites.get(user_key, frozenset())

    def toggle(self, user_key: str, prompt_id: str) -> bool:
        """Flip membership of `prompt_id` and return the new status."""
        with self._lock:
            current = self._favorites.get(user_key, frozenset())
            if prompt_id in current:
                self._favorites[user_key] = current - {prompt_id}
                return False
            self._favorites[user_key] = current | {prompt_id}
            return True

    def user_keys(self) -> frozenset[str]:
        """Return the keys of all users that have toggled at least once."""
        return frozenset(self._favorites)
