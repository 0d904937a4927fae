"""
Use case: Toggle a prompt in the caller's favorite set.

Input: ToggleFavoriteCommand (user_key, prompt_id)
Output: FavoriteStatusResult with the post-toggle status
Side effects: Adds or removes the prompt in the FavoriteStore.
Failure cases: MissingPromptIdError, ToggleFavoriteFailedError.
"""

import logging

from banana_api.application.favorites.dtos import (
    FavoriteStatusResult,
    ToggleFavoriteCommand,
)
from banana_api.domain.favorites.errors import (
    MissingPromptIdError,
    ToggleFavoriteFailedError,
)
from banana_api.domain.favorites.ports import FavoriteStore

logger = logging.getLogger(__name__)


class ToggleFavoriteUseCase:
    """Flips favorite membership of a prompt for the caller.

    Calling it twice in a row restores the original membership.
    """

    def __init__(self, store: FavoriteStore) -> None:
        self._store = store

    def execute(self, command: ToggleFavoriteCommand) -> FavoriteStatusResult:
        """Run the toggle.

        Args:
            command: The caller's key and the prompt id.

        Returns:
            The favorite status after the toggle.
        """
        if not command.prompt_id:
            raise MissingPromptIdError()

        try:
            is_favorite = self._store.toggle(command.user_key, command.prompt_id)
        except Exception as exc:
            logger.exception("Favorite store toggle failed for prompt=%s", command.prompt_id)
            raise ToggleFavoriteFailedError(type(exc).__name__) from exc

        logger.info(
            "Favorite toggled: prompt=%s, is_favorite=%s",
            command.prompt_id,
            is_favorite,
        )
        return FavoriteStatusResult(prompt_id=command.prompt_id, is_favorite=is_favorite)
