"""
Dependency injection for the favorites bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the favorites context.
"""

import logging
from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine

from banana_api.application.favorites.get_favorite_status import (
    GetFavoriteStatusUseCase,
)
from banana_api.application.favorites.toggle_favorite import ToggleFavoriteUseCase
from banana_api.core.config import settings
from banana_api.domain.favorites.ports import FavoriteStore
from banana_api.infrastructure.favorites.memory_store import InMemoryFavoriteStore
from banana_api.infrastructure.favorites.sql_store import SqlFavoriteStore
from banana_api.interfaces.favorites.identity import (
    SessionCookieKeyResolver,
    UserAgentKeyResolver,
    UserKeyResolver,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_favorite_store() -> FavoriteStore:
    """Return the process-wide favorite store.

    Uses SQL storage when a database URL is configured, otherwise the
    in-memory store. Built once per process.
    """
    if settings.favorites_database_url:
        logger.info("Using SQL favorite store.")
        engine = create_engine(settings.favorites_database_url, pool_pre_ping=True)
        return SqlFavoriteStore(engine=engine)
    logger.info("Using in-memory favorite store; favorites are lost on restart.")
    return InMemoryFavoriteStore()


def get_user_key_resolver() -> UserKeyResolver:
    """Build the identity resolver selected by FAVORITES_IDENTITY."""
    user_agent = UserAgentKeyResolver()
    if settings.favorites_identity == "session":
        return SessionCookieKeyResolver(settings.session_cookie_name, fallback=user_agent)
    return user_agent


def get_favorite_status_use_case(
    store: FavoriteStore = Depends(get_favorite_store),
) -> GetFavoriteStatusUseCase:
    """Build GetFavoriteStatusUseCase with its store."""
    return GetFavoriteStatusUseCase(store=store)


def get_toggle_favorite_use_case(
    store: FavoriteStore = Depends(get_favorite_store),
) -> ToggleFavoriteUseCase:
    """Build ToggleFavoriteUseCase with its store."""
    return ToggleFavoriteUseCase(store=store)
