"""User read endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from recipe_api.api.dependencies import get_container, require_user
from recipe_api.domain.models import UserRecord
from recipe_api.services.presenters import present_user

router = APIRouter(prefix="/user", tags=["users"])


@router.get("")
async def list_users(request: Request) -> dict[str, object]:
    """Return all users without credentials."""
    users = get_container(request).user_service.list_users()
    return {"data": [present_user(user).as_dict() for user in users]}


@router.get("/me")
async def me(user: UserRecord = Depends(require_user)) -> dict[str, object]:
    """Return the authenticated user."""
    return {"data": present_user(user).as_dict()}


@router.get("/{user_id}")
async def user_detail(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a single user."""
    user = get_container(request).user_service.get_user(user_id)
    return {"data": present_user(user).as_dict()}
