"""Supabase-backed like repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from recipe_api.services.likes import LikeRepository


@dataclass
class SupabaseLikeRepository(LikeRepository):
    """Supabase implementation for likes.

    The ``likes`` table carries a unique index on ``(user_id, recipe_id)``.
    """

    client: Client

    def delete_like(self, user_id: UUID, recipe_id: UUID) -> bool:
        """Delete the user's like; return whether one existed."""
        response = (
            self.client.table("likes")
            .delete()
            .eq("user_id", str(user_id))
            .eq("recipe_id", str(recipe_id))
            .execute()
        )
        return bool(response.data)

    def create_like(self, user_id: UUID, recipe_id: UUID) -> None:
        """Insert a like; a concurrent duplicate is ignored."""
        self.client.table("likes").upsert(
            {"user_id": str(user_id), "recipe_id": str(recipe_id)},
            on_conflict="user_id,recipe_id",
            ignore_duplicates=True,
        ).execute()

    def count_likes(self, recipe_id: UUID) -> int:
        """Return the number of likes for a recipe."""
        response = (
            self.client.table("likes")
            .select("id", count="exact")
            .eq("recipe_id", str(recipe_id))
            .execute()
        )
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])
