"""Supabase-backed rating repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from recipe_api.services.ratings import RatingRepository


@dataclass
class SupabaseRatingRepository(RatingRepository):
    """Supabase implementation for ratings.

    The ``ratings`` table carries a unique index on ``(user_id, recipe_id)``.
    """

    client: Client

    def upsert_rating(self, user_id: UUID, recipe_id: UUID, value: float) -> None:
        """Insert or replace the user's rating for a recipe."""
        self.client.table("ratings").upsert(
            {
                "user_id": str(user_id),
                "recipe_id": str(recipe_id),
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id,recipe_id",
        ).execute()

    def delete_rating(self, user_id: UUID, recipe_id: UUID) -> bool:
        """Delete the user's rating; return whether one existed."""
        response = (
            self.client.table("ratings")
            .delete()
            .eq("user_id", str(user_id))
            .eq("recipe_id", str(recipe_id))
            .execute()
        )
        return bool(response.data)

    def get_rating(self, user_id: UUID, recipe_id: UUID) -> float | None:
        """Return the user's rating value, if any."""
        response = (
            self.client.table("ratings")
            .select("value")
            .eq("user_id", str(user_id))
            .eq("recipe_id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return float(response.data[0]["value"])

    def list_values(self, recipe_id: UUID) -> list[float]:
        """Return every rating value for a recipe."""
        response = (
            self.client.table("ratings")
            .select("value")
            .eq("recipe_id", str(recipe_id))
            .execute()
        )
        return [float(row["value"]) for row in response.data or []]
