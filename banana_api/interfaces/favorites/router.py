"""
FastAPI router for the favorites bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers; any other
failure inside a route is re-raised as that route's domain error.

The prompt id segment may be empty (``/prompts//favorite``) so that the
use case, rather than the router, answers with MISSING_ID.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from starlette.convertors import Convertor, register_url_convertor

from banana_api.application.favorites.dtos import (
    FavoriteStatusQuery,
    ToggleFavoriteCommand,
)
from banana_api.application.favorites.get_favorite_status import (
    GetFavoriteStatusUseCase,
)
from banana_api.application.favorites.toggle_favorite import ToggleFavoriteUseCase
from banana_api.core.config import settings
from banana_api.domain.favorites.errors import (
    FavoriteStatusUnavailableError,
    FavoritesDomainError,
    ToggleFavoriteFailedError,
)
from banana_api.interfaces.favorites.dependencies import (
    get_favorite_status_use_case,
    get_toggle_favorite_use_case,
    get_user_key_resolver,
)
from banana_api.interfaces.favorites.identity import UserKeyResolver
from banana_api.interfaces.favorites.schemas import (
    FAVORITE_ADDED_MESSAGE,
    FAVORITE_REMOVED_MESSAGE,
    IS_FAVORITE_MESSAGE,
    NOT_FAVORITE_MESSAGE,
    FavoriteData,
    FavoriteResponse,
)
from banana_api.interfaces.schemas import ErrorResponse
from banana_api.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)

STATUS_CACHE_CONTROL = "private, max-age=60"


class OptionalSegmentConvertor(Convertor):
    """Matches a single path segment, including an empty one."""

    regex = "[^/]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


register_url_convertor("segment", OptionalSegmentConvertor())

router = APIRouter(prefix="/prompts", tags=["favorites"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/{prompt_id:segment}/favorite",
    response_model=FavoriteResponse,
    responses=_ERROR_RESPONSES,
    summary="Toggle favorite",
    description="Add the prompt to the caller's favorites, or remove it if present.",
)
@limiter.limit(settings.rate_limit_default)
def toggle_favorite(
    request: Request,
    prompt_id: str,
    use_case: ToggleFavoriteUseCase = Depends(get_toggle_favorite_use_case),
    resolver: UserKeyResolver = Depends(get_user_key_resolver),
) -> FavoriteResponse:
    """Toggle the favorite status of a prompt.

    Any failure other than a domain error is reported as
    TOGGLE_FAVORITE_FAILED.
    """
    try:
        command = ToggleFavoriteCommand(
            user_key=resolver.resolve(request),
            prompt_id=prompt_id,
        )
        result = use_case.execute(command)
        return FavoriteResponse(
            data=FavoriteData(
                prompt_id=result.prompt_id,
                is_favorite=result.is_favorite,
                message=(
                    FAVORITE_ADDED_MESSAGE if result.is_favorite else FAVORITE_REMOVED_MESSAGE
                ),
            )
        )
    except FavoritesDomainError:
        raise
    except Exception as exc:
        logger.exception("Toggle favorite failed for prompt=%s", prompt_id)
        raise ToggleFavoriteFailedError(type(exc).__name__) from exc


@router.get(
    "/{prompt_id:segment}/favorite",
    response_model=FavoriteResponse,
    responses=_ERROR_RESPONSES,
    summary="Get favorite status",
    description="Report whether the prompt is among the caller's favorites.",
)
def get_favorite_status(
    request: Request,
    response: Response,
    prompt_id: str,
    use_case: GetFavoriteStatusUseCase = Depends(get_favorite_status_use_case),
    resolver: UserKeyResolver = Depends(get_user_key_resolver),
) -> FavoriteResponse:
    """Return the favorite status of a prompt."""
    try:
        query = FavoriteStatusQuery(
            user_key=resolver.resolve(request),
            prompt_id=prompt_id,
        )
        result = use_case.execute(query)
        response.headers["Cache-Control"] = STATUS_CACHE_CONTROL
        return FavoriteResponse(
            data=FavoriteData(
                prompt_id=result.prompt_id,
                is_favorite=result.is_favorite,
                message=IS_FAVORITE_MESSAGE if result.is_favorite else NOT_FAVORITE_MESSAGE,
            )
        )
    except FavoritesDomainError:
        raise
    except Exception as exc:
        logger.exception("Get favorite status failed for prompt=%s", prompt_id)
        raise FavoriteStatusUnavailableError(type(exc).__name__) from exc
