"""
Use case: Read whether a prompt is one of the caller's favorites.

Input: FavoriteStatusQuery (user_key, prompt_id)
Output: FavoriteStatusResult
Side effects: None. Unknown users are not added to the store.
Failure cases: MissingPromptIdError, FavoriteStatusUnavailableError.
"""

import logging

from banana_api.application.favorites.dtos import (
    FavoriteStatusQuery,
    FavoriteStatusResult,
)
from banana_api.domain.favorites.errors import (
    FavoriteStatusUnavailableError,
    MissingPromptIdError,
)
from banana_api.domain.favorites.ports import FavoriteStore

logger = logging.getLogger(__name__)


class GetFavoriteStatusUseCase:
    """Looks up a single prompt in the caller's favorite set."""

    def __init__(self, store: FavoriteStore) -> None:
        self._store = store

    def execute(self, query: FavoriteStatusQuery) -> FavoriteStatusResult:
        """Run the favorite status lookup.

        Args:
            query: The caller's key and the prompt id.

        Returns:
            The current favorite status of the prompt.
        """
        if not query.prompt_id:
            raise MissingPromptIdError()

        try:
            is_favorite = self._store.contains(query.user_key, query.prompt_id)
        except Exception as exc:
            logger.exception("Favorite store lookup failed for prompt=%s", query.prompt_id)
            raise FavoriteStatusUnavailableError(type(exc).__name__) from exc

        return FavoriteStatusResult(prompt_id=query.prompt_id, is_favorite=is_favorite)
