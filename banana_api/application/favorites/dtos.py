"""
Data Transfer Objects for the favorites application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FavoriteStatusQuery:
    """Input DTO for reading a favorite status.

    Attributes:
        user_key: Derived identity of the caller.
        prompt_id: Identifier of the prompt. May be empty when the
            route segment was empty; the use case rejects it.
    """

    user_key: str
    prompt_id: str


@dataclass(frozen=True)
class ToggleFavoriteCommand:
    """Input DTO for toggling a favorite.

    Attributes:
        user_key: Derived identity of the caller.
        prompt_id: Identifier of the prompt to toggle.
    """

    user_key: str
    prompt_id: str


@dataclass(frozen=True)
class FavoriteStatusResult:
    """Output DTO for a favorite status.

    Attributes:
        prompt_id: Identifier of the prompt.
        is_favorite: Whether the prompt is a favorite (after any toggle).
    """

    prompt_id: str
    is_favorite: bool
