"""Recipe CRUD endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from recipe_api.api.dependencies import get_container, optional_user, require_user
from recipe_api.api.schemas import RecipeCreateRequest, RecipeUpdateRequest
from recipe_api.domain.models import UserRecord

router = APIRouter(prefix="/recipe", tags=["recipes"])


@router.get("/units")
async def units(request: Request) -> list[str]:
    """Return the supported ingredient units."""
    return get_container(request).recipe_service.units()


@router.get("")
async def list_recipes(
    request: Request,
    title: str | None = None,
    ingredient: str | None = None,
    page: int | None = Query(default=None, ge=1),
    page_size: int | None = Query(default=None, ge=1, le=100, alias="pageSize"),
    viewer: UserRecord | None = Depends(optional_user),
) -> dict[str, object]:
    """List recipes, optionally filtered by title or ingredient tokens."""
    result = get_container(request).recipe_service.list_recipes(
        viewer_id=viewer.id if viewer else None,
        search=title or ingredient,
        page=page,
        page_size=page_size,
    )
    return result.as_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeCreateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Create a recipe owned by the caller."""
    recipe = get_container(request).recipe_service.create_recipe(
        user.id, payload.to_payload()
    )
    return recipe.as_dict()


@router.get("/{recipe_id}")
async def recipe_detail(
    recipe_id: UUID,
    request: Request,
    viewer: UserRecord | None = Depends(optional_user),
) -> dict[str, object]:
    """Return a recipe with its comments."""
    recipe = get_container(request).recipe_service.get_recipe(
        recipe_id, viewer_id=viewer.id if viewer else None
    )
    return recipe.as_dict()


@router.put("/{recipe_id}")
async def update_recipe(
    recipe_id: UUID,
    payload: RecipeUpdateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Apply a partial update to the caller's recipe."""
    recipe = get_container(request).recipe_service.update_recipe(
        recipe_id, user.id, payload.to_patch()
    )
    return recipe.as_dict()


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: UUID,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> Response:
    """Delete the caller's recipe."""
    get_container(request).recipe_service.delete_recipe(recipe_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
