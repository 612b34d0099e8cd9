"""Rating upserts and the recipe rating aggregate."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_api.domain.errors import InvalidInputError
from recipe_api.domain.interactions import RatingSummary
from recipe_api.services.recipes import RecipeRepository, load_recipe

MIN_RATING = 0.5
MAX_RATING = 5.0

logger = logging.getLogger(__name__)


class RatingRepository(Protocol):
    """Persistence interface for ratings, unique per (user, recipe)."""

    def upsert_rating(self, user_id: UUID, recipe_id: UUID, value: float) -> None:
        """Insert or replace the user's rating for a recipe."""

    def delete_rating(self, user_id: UUID, recipe_id: UUID) -> bool:
        """Delete the user's rating; return whether one existed."""

    def get_rating(self, user_id: UUID, recipe_id: UUID) -> float | None:
        """Return the user's rating value, if any."""

    def list_values(self, recipe_id: UUID) -> list[float]:
        """Return every rating value for a recipe."""


@dataclass
class RatingService:
    """Application service for recipe ratings.

    The recompute reads all values and then writes the summary in a second
    call. Concurrent raters on one recipe can leave a last-write-wins summary
    until the next rating write.
    """

    repository: RatingRepository
    recipe_repository: RecipeRepository

    def submit_rating(
        self, recipe_id: UUID, user_id: UUID, value: float | None
    ) -> RatingSummary:
        """Set or clear a user's rating and return the refreshed aggregate."""
        load_recipe(self.recipe_repository, recipe_id)
        if value is None:
            self.repository.delete_rating(user_id, recipe_id)
        else:
            self.repository.upsert_rating(user_id, recipe_id, validate_rating(value))

        summary = summarize_ratings(self.repository.list_values(recipe_id))
        self.recipe_repository.update_rating_stats(
            recipe_id, summary.rating_count, summary.average_rating
        )
        logger.info(
            "Recomputed rating aggregate",
            extra={"recipe_id": str(recipe_id), "rating_count": summary.rating_count},
        )
        return summary

    def my_rating(self, recipe_id: UUID, user_id: UUID) -> float | None:
        """Return the user's current rating for the recipe."""
        load_recipe(self.recipe_repository, recipe_id)
        return self.repository.get_rating(user_id, recipe_id)


def validate_rating(value: float) -> float:
    """Accept values from 0.5 to 5 in half steps."""
    if isinstance(value, bool) or not math.isfinite(value):
        raise InvalidInputError("Rating must be a number", errors={"value": "invalid"})
    if value < MIN_RATING:
        raise InvalidInputError(
            "Minimum rating is 0.5", errors={"value": "Minimum rating is 0.5"}
        )
    if value > MAX_RATING:
        raise InvalidInputError(
            "Maximum rating is 5", errors={"value": "Maximum rating is 5"}
        )
    if not float(value * 2).is_integer():
        raise InvalidInputError(
            "Rating must be in 0.5 increments",
            errors={"value": "Rating must be in 0.5 increments"},
        )
    return float(value)


def summarize_ratings(values: list[float]) -> RatingSummary:
    """Return the count and the mean rounded to one decimal."""
    if not values:
        return RatingSummary(rating_count=0, average_rating=0.0)
    average = sum(values) / len(values)
    return RatingSummary(rating_count=len(values), average_rating=round(average, 1))
