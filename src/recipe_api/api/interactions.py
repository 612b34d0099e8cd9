"""Rating and like endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from recipe_api.api.dependencies import get_container, require_user
from recipe_api.api.rate_limits import LIKE_LIMIT, RATING_LIMIT, limiter
from recipe_api.api.schemas import RateRequest
from recipe_api.domain.models import UserRecord

router = APIRouter(prefix="/recipe", tags=["interactions"])


@router.post("/{recipe_id}/rate")
@limiter.limit(
    RATING_LIMIT, error_message="Too many rating requests. Try again in a minute."
)
async def rate_recipe(
    recipe_id: UUID,
    payload: RateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Set or clear the caller's rating and return the recipe aggregate."""
    summary = get_container(request).rating_service.submit_rating(
        recipe_id, user.id, payload.value
    )
    return summary.as_dict()


@router.get("/{recipe_id}/rate")
async def my_rating(
    recipe_id: UUID,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return the caller's rating, or null when they have not rated."""
    rating = get_container(request).rating_service.my_rating(recipe_id, user.id)
    return {"rating": rating}


@router.post("/{recipe_id}/like")
@limiter.limit(
    LIKE_LIMIT, error_message="Too many like requests. Please try again in a minute."
)
async def like_recipe(
    recipe_id: UUID,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Toggle the caller's like."""
    state = get_container(request).like_service.toggle_like(recipe_id, user.id)
    return state.as_dict()
