"""Recipe CRUD, search and the author-only mutation guard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol
from uuid import UUID  # noqa: TC003

from recipe_api.domain.errors import InvalidInputError, NotFoundError
from recipe_api.domain.recipes import EDITABLE_FIELDS, VALID_UNITS, RecipeRecord
from recipe_api.services.image_files import ImageStore, remove_stale_image
from recipe_api.services.ownership import ensure_owner
from recipe_api.services.presenters import (
    RecipeView,
    present_comment,
    present_recipe,
)
from recipe_api.services.users import UserService  # noqa: TC001

if TYPE_CHECKING:
    from recipe_api.services.comments import CommentRepository

DEFAULT_PAGE_SIZE = 12


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create_recipe(
        self, author_id: UUID, payload: dict[str, object]
    ) -> RecipeRecord:
        """Create a recipe and return it."""

    def get_recipe(self, recipe_id: UUID) -> RecipeRecord | None:
        """Return a recipe by id, if present."""

    def list_recipes(self) -> list[RecipeRecord]:
        """Return all recipes, newest first."""

    def update_recipe(
        self, recipe_id: UUID, payload: dict[str, object]
    ) -> RecipeRecord:
        """Apply a partial update and return the stored recipe."""

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe row."""

    def update_rating_stats(
        self, recipe_id: UUID, rating_count: int, average_rating: float
    ) -> None:
        """Overwrite the denormalized rating counters."""

    def update_like_count(self, recipe_id: UUID, like_count: int) -> None:
        """Overwrite the denormalized like counter."""


@dataclass
class RecipePage:
    """A page of recipe views plus paging metadata."""

    recipes: list[RecipeView]
    total: int
    page: int | None
    page_size: int | None

    def as_dict(self) -> dict[str, object]:
        return {
            "recipes": [recipe.as_dict() for recipe in self.recipes],
            "meta": {
                "total": self.total,
                "page": self.page,
                "pageSize": self.page_size,
            },
        }


def normalize_steps(steps: object) -> list[str]:
    """Trim instruction steps and drop empty ones; at least one must remain."""
    if not isinstance(steps, list):
        raise InvalidInputError("Instructions must be an array of step strings")
    clean = []
    for step in steps:
        if not isinstance(step, str):
            raise InvalidInputError("Each step must be a string")
        trimmed = step.strip()
        if trimmed:
            clean.append(trimmed)
    if not clean:
        raise InvalidInputError("At least one instruction step is required")
    return clean


def load_recipe(repository: RecipeRepository, recipe_id: UUID) -> RecipeRecord:
    """Return a recipe or raise the not-found error every recipe route shares."""
    recipe = repository.get_recipe(recipe_id)
    if recipe is None:
        raise NotFoundError("Recipe not found")
    return recipe


@dataclass
class RecipeService:
    """Application service for recipes."""

    repository: RecipeRepository
    comment_repository: CommentRepository
    user_service: UserService
    image_store: ImageStore

    @staticmethod
    def units() -> list[str]:
        """Return the supported ingredient units."""
        return list(VALID_UNITS)

    def create_recipe(
        self, author_id: UUID, payload: dict[str, object]
    ) -> RecipeView:
        """Create a recipe owned by the acting user."""
        fields = _editable(payload)
        fields["instructions"] = normalize_steps(fields.get("instructions"))
        recipe = self.repository.create_recipe(author_id, fields)
        return self._detail(recipe, viewer_id=author_id)

    def list_recipes(
        self,
        viewer_id: UUID | None = None,
        search: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> RecipePage:
        """Return recipes matching the search term, newest first."""
        recipes = self.repository.list_recipes()
        tokens = (search or "").split()
        if tokens:
            recipes = [recipe for recipe in recipes if recipe.matches(tokens)]
        recipes = sorted(recipes, key=_created_key, reverse=True)
        total = len(recipes)
        if page is None and page_size is not None:
            page = 1
        if page is not None:
            page_size = page_size or DEFAULT_PAGE_SIZE
            start = (page - 1) * page_size
            recipes = recipes[start : start + page_size]
        authors = self.user_service.resolve_authors(
            [recipe.author_id for recipe in recipes]
        )
        return RecipePage(
            recipes=[present_recipe(recipe, authors, viewer_id) for recipe in recipes],
            total=total,
            page=page,
            page_size=page_size,
        )

    def get_recipe(
        self, recipe_id: UUID, viewer_id: UUID | None = None
    ) -> RecipeView:
        """Return the recipe detail with its comments."""
        recipe = load_recipe(self.repository, recipe_id)
        return self._detail(recipe, viewer_id)

    def update_recipe(
        self, recipe_id: UUID, actor_id: UUID, patch: dict[str, object]
    ) -> RecipeView:
        """Apply the fields present in the patch; absent fields keep their value."""
        recipe = load_recipe(self.repository, recipe_id)
        ensure_owner(
            recipe.author_id, actor_id, "You are not allowed to edit this recipe"
        )
        fields = _editable(patch)
        if "instructions" in fields:
            fields["instructions"] = normalize_steps(fields["instructions"])
        if fields:
            previous_image = recipe.image
            recipe = self.repository.update_recipe(recipe_id, fields)
            if "image" in fields:
                remove_stale_image(
                    self.image_store, recipe.id, previous_image, recipe.image
                )
        return self._detail(recipe, viewer_id=actor_id)

    def delete_recipe(self, recipe_id: UUID, actor_id: UUID) -> None:
        """Delete a recipe; comments, likes and ratings are left in place."""
        recipe = load_recipe(self.repository, recipe_id)
        ensure_owner(
            recipe.author_id, actor_id, "You are not allowed to delete this recipe"
        )
        self.repository.delete_recipe(recipe_id)

    def _detail(self, recipe: RecipeRecord, viewer_id: UUID | None) -> RecipeView:
        comments = sorted(
            self.comment_repository.list_comments(recipe.id),
            key=lambda comment: comment.created_at,
            reverse=True,
        )
        authors = self.user_service.resolve_authors(
            [recipe.author_id] + [comment.author_id for comment in comments]
        )
        return present_recipe(
            recipe,
            authors,
            viewer_id,
            comments=[present_comment(comment, authors) for comment in comments],
        )


def _editable(payload: dict[str, object]) -> dict[str, object]:
    return {key: value for key, value in payload.items() if key in EDITABLE_FIELDS}


def _created_key(recipe: RecipeRecord) -> datetime:
    return recipe.created_at or datetime.min.replace(tzinfo=UTC)
