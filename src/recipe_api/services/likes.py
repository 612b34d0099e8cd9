"""Like toggling and the recipe like counter."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_api.domain.interactions import LikeState
from recipe_api.services.recipes import RecipeRepository, load_recipe

logger = logging.getLogger(__name__)


class LikeRepository(Protocol):
    """Persistence interface for likes, unique per (user, recipe)."""

    def delete_like(self, user_id: UUID, recipe_id: UUID) -> bool:
        """Delete the user's like; return whether one existed."""

    def create_like(self, user_id: UUID, recipe_id: UUID) -> None:
        """Insert a like, doing nothing when the pair already exists."""

    def count_likes(self, recipe_id: UUID) -> int:
        """Return the number of likes for a recipe."""


@dataclass
class LikeService:
    """Application service for recipe likes."""

    repository: LikeRepository
    recipe_repository: RecipeRepository

    def toggle_like(self, recipe_id: UUID, user_id: UUID) -> LikeState:
        """Flip the user's like and persist the fresh like count."""
        load_recipe(self.recipe_repository, recipe_id)
        removed = self.repository.delete_like(user_id, recipe_id)
        if not removed:
            self.repository.create_like(user_id, recipe_id)

        like_count = self.repository.count_likes(recipe_id)
        self.recipe_repository.update_like_count(recipe_id, like_count)
        logger.info(
            "Toggled like",
            extra={"recipe_id": str(recipe_id), "liked": not removed},
        )
        return LikeState(liked=not removed, like_count=like_count)
