"""
Adapter: SQL favorite store.

Implements the FavoriteStore port on top of a relational table.
Used instead of the in-memory store when FAVORITES_DATABASE_URL is set.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

from banana_api.domain.favorites.ports import FavoriteStore

logger = logging.getLogger(__name__)

_CREATE_TABLE = text(
    """
    CREATE TABLE IF NOT EXISTS prompt_favorites (
        user_key   VARCHAR(255) NOT NULL,
        prompt_id  VARCHAR(255) NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        PRIMARY KEY (user_key, prompt_id)
    )
    """
)


class SqlFavoriteStore(FavoriteStore):
    """Persists favorites in the `prompt_favorites` table.

    One row per (user_key, prompt_id) pair. The table is created on
    construction if it does not exist.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        with self._engine.begin() as conn:
            conn.execute(_CREATE_TABLE)

    def get(self, user_key: str) -> frozenset[str]:
        """Return all prompt ids favorited by `user_key`."""
        query = text("SELECT prompt_id FROM prompt_favorites WHERE user_key = :user_key")
        with self._engine.connect() as conn:
            rows = conn.execute(query, {"user_key": user_key})
            return frozenset(row.prompt_id for row in rows)

    def contains(self, user_key: str, prompt_id: str) -> bool:
        """Return True if the (user_key, prompt_id) row exists."""
        query = text(
            """
            SELECT 1 FROM prompt_favorites
            WHERE user_key = :user_key AND prompt_id = :prompt_id
            """
        )
        with self._engine.connect() as conn:
            row = conn.execute(
                query, {"user_key": user_key, "prompt_id": prompt_id}
            ).first()
        return row is not None

    def toggle(self, user_key: str, prompt_id: str) -> bool:
        """Delete the row if present, otherwise insert it, in one transaction."""
        params = {"user_key": user_key, "prompt_id": prompt_id}
        with self._engine.begin() as conn:
            deleted = conn.execute(
                text(
                    """
                    DELETE FROM prompt_favorites
                    WHERE user_key = :user_key AND prompt_id = :prompt_id
                    """
                ),
                params,
            ).rowcount
            if deleted:
                return False
            conn.execute(
                text(
                    """
                    INSERT INTO prompt_favorites (user_key, prompt_id)
                    VALUES (:user_key, :prompt_id)
                    """
                ),
                params,
            )
        logger.debug("Inserted favorite row for prompt_id=%s.", prompt_id)
        return True
