"""Ownership guard for mutating requests."""

from uuid import UUID

from recipe_api.domain.errors import ForbiddenError


def ensure_owner(owner_id: UUID, actor_id: UUID, message: str) -> None:
    """Raise when the acting user is not the recorded owner of a resource."""
    if owner_id != actor_id:
        raise ForbiddenError(message)
