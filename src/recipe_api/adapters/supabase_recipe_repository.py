"""Supabase-backed recipe repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from recipe_api.domain.recipes import Ingredient, RecipeRecord
from recipe_api.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes.

    Ingredients and instructions live in jsonb columns; the rating and like
    counters are plain columns written only by the aggregation services.
    """

    client: Client

    def create_recipe(
        self, author_id: UUID, payload: dict[str, object]
    ) -> RecipeRecord:
        """Create a recipe and return it."""
        response = (
            self.client.table("recipes")
            .insert({"author_id": str(author_id), **_to_row(payload)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return _parse_recipe(response.data[0])

    def get_recipe(self, recipe_id: UUID) -> RecipeRecord | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def list_recipes(self) -> list[RecipeRecord]:
        """Return all recipes, newest first."""
        response = (
            self.client.table("recipes")
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def update_recipe(
        self, recipe_id: UUID, payload: dict[str, object]
    ) -> RecipeRecord:
        """Apply a partial update and return the stored recipe."""
        response = (
            self.client.table("recipes")
            .update({**_to_row(payload), "updated_at": _now()})
            .eq("id", str(recipe_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update recipe")
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe row."""
        self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()

    def update_rating_stats(
        self, recipe_id: UUID, rating_count: int, average_rating: float
    ) -> None:
        """Overwrite the denormalized rating counters."""
        self.client.table("recipes").update(
            {"rating_count": rating_count, "average_rating": average_rating}
        ).eq("id", str(recipe_id)).execute()

    def update_like_count(self, recipe_id: UUID, like_count: int) -> None:
        """Overwrite the denormalized like counter."""
        self.client.table("recipes").update({"like_count": like_count}).eq(
            "id", str(recipe_id)
        ).execute()


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    row = dict(payload)
    ingredients = row.get("ingredients")
    if isinstance(ingredients, list):
        row["ingredients"] = [
            item.as_dict() if isinstance(item, Ingredient) else dict(item)
            for item in ingredients
        ]
    return row


def _parse_recipe(row: dict[str, object]) -> RecipeRecord:
    """Parse a recipe row into a domain model."""
    return RecipeRecord(
        id=UUID(str(row["id"])),
        author_id=UUID(str(row["author_id"])),
        title=str(row.get("title", "")),
        description=row.get("description"),
        cooking_time=int(row.get("cooking_time", 0)),
        ingredients=[
            Ingredient(
                name=str(item.get("name", "")),
                amount=float(item.get("amount", 0.0)),
                unit=str(item.get("unit", "")),
            )
            for item in row.get("ingredients") or []
        ],
        instructions=[str(step) for step in row.get("instructions") or []],
        image=row.get("image"),
        average_rating=float(row.get("average_rating") or 0.0),
        rating_count=int(row.get("rating_count") or 0),
        like_count=int(row.get("like_count") or 0),
        created_at=_parse_time(row.get("created_at")),
        updated_at=_parse_time(row.get("updated_at")),
    )


def _parse_time(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def _now() -> str:
    return datetime.now(tz=UTC).isoformat()
