"""
Domain-specific errors for the favorites bounded context.

All errors raised from the domain and application layers are defined
here. Each carries the stable error code and the user-facing message
used in the API error envelope; the detailed `message` is for logs only.
No framework imports allowed.
"""


class FavoritesDomainError(Exception):
    """Base error for all favorites domain errors."""

    code = "FAVORITES_ERROR"
    public_message = "操作失败，请稍后重试"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MissingPromptIdError(FavoritesDomainError):
    """Raised when a request names no prompt identifier."""

    code = "MISSING_ID"
    public_message = "缺少提示词ID"

    def __init__(self) -> None:
        super().__init__("Prompt id is missing or empty")


class ToggleFavoriteFailedError(FavoritesDomainError):
    """Raised when the favorite store fails during a toggle."""

    code = "TOGGLE_FAVORITE_FAILED"
    public_message = "操作失败，请稍后重试"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Toggling favorite failed: {reason}")
        self.reason = reason


class FavoriteStatusUnavailableError(FavoritesDomainError):
    """Raised when the favorite store fails during a status lookup."""

    code = "GET_FAVORITE_STATUS_FAILED"
    public_message = "获取收藏状态失败，请稍后重试"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Reading favorite status failed: {reason}")
        self.reason = reason
