"""Comment endpoints nested under a recipe."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from recipe_api.api.dependencies import get_container, require_user
from recipe_api.api.schemas import CommentRequest
from recipe_api.domain.models import UserRecord

router = APIRouter(prefix="/recipe/{recipe_id}/comment", tags=["comments"])


@router.get("")
async def list_comments(recipe_id: UUID, request: Request) -> dict[str, object]:
    """Return the recipe's comments, newest first."""
    comments = get_container(request).comment_service.list_comments(recipe_id)
    return {"data": [comment.as_dict() for comment in comments]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_comment(
    recipe_id: UUID,
    payload: CommentRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Comment on a recipe."""
    comment = get_container(request).comment_service.add_comment(
        recipe_id, user.id, payload.content
    )
    return {"data": comment.as_dict()}


@router.put("/{comment_id}")
async def update_comment(
    recipe_id: UUID,
    comment_id: UUID,
    payload: CommentRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Edit the caller's comment."""
    comment = get_container(request).comment_service.update_comment(
        recipe_id, comment_id, user.id, payload.content
    )
    return {"data": comment.as_dict()}


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    recipe_id: UUID,
    comment_id: UUID,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> Response:
    """Delete the caller's comment."""
    get_container(request).comment_service.delete_comment(
        recipe_id, comment_id, user.id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
