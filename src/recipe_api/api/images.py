"""Recipe image endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from recipe_api.api.dependencies import get_container, require_user
from recipe_api.api.rate_limits import UPLOAD_LIMIT, limiter
from recipe_api.api.schemas import ImageUploadRequest
from recipe_api.domain.models import UserRecord

router = APIRouter(prefix="/recipe/{recipe_id}/image", tags=["images"])


@router.post("")
@limiter.limit(
    UPLOAD_LIMIT, error_message="Image upload limit reached. Please try again later."
)
async def upload_image(
    recipe_id: UUID,
    payload: ImageUploadRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, str]:
    """Store a new image for the caller's recipe."""
    filename = get_container(request).image_service.upload_image(
        recipe_id, user.id, payload.image
    )
    return {"message": "Image uploaded", "image": filename}


@router.get("")
async def get_image(recipe_id: UUID, request: Request) -> dict[str, str]:
    """Return the recipe image as a data URI."""
    return {"image": get_container(request).image_service.get_image(recipe_id)}
