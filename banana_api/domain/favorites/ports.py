"""
Port interfaces (ABCs) for the favorites bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod


class FavoriteStore(ABC):
    """Port for per-user sets of favorited prompt ids."""

    @abstractmethod
    def get(self, user_key: str) -> frozenset[str]:
        """Return the favorites of `user_key`.

        An unknown user has no favorites. Implementations must not create
        an entry for the user as a side effect.
        """
        raise NotImplementedError

    @abstractmethod
    def toggle(self, user_key: str, prompt_id: str) -> bool:
        """Flip membership of `prompt_id` in the favorites of `user_key`.

        Returns:
            True if the prompt is a favorite after the call.
        """
        raise NotImplementedError

    def contains(self, user_key: str, prompt_id: str) -> bool:
        """Return True if `prompt_id` is among the favorites of `user_key`."""
        return prompt_id in self.get(user_key)
