"""
Pydantic schemas for the favorite API responses.

The prompt id comes from the URL path, so there is no request body.
"""

from banana_api.interfaces.schemas import CamelModel

FAVORITE_ADDED_MESSAGE = "已添加到收藏"
FAVORITE_REMOVED_MESSAGE = "已从收藏中移除"
IS_FAVORITE_MESSAGE = "已收藏"
NOT_FAVORITE_MESSAGE = "未收藏"


class FavoriteData(CamelModel):
    """Favorite status of one prompt.

    Attributes:
        prompt_id: Identifier of the prompt.
        is_favorite: Current (post-toggle) status.
        message: Human-readable status message.
    """

    prompt_id: str
    is_favorite: bool
    message: str


class FavoriteResponse(CamelModel):
    """Successful favorite read or toggle."""

    success: bool = True
    data: FavoriteData
