"""Domain models for recipes."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

VALID_UNITS = ("g", "kg", "ml", "l", "tsp", "tbsp", "cup", "piece")

# Fields an author may change through a partial update.
EDITABLE_FIELDS = (
    "title",
    "description",
    "cooking_time",
    "ingredients",
    "instructions",
    "image",
)


@dataclass(frozen=True)
class Ingredient:
    """Single ingredient line of a recipe."""

    name: str
    amount: float
    unit: str

    def as_dict(self) -> dict[str, object]:
        return {"name": self.name, "amount": self.amount, "unit": self.unit}


@dataclass(frozen=True)
class RecipeRecord:
    """Represents a recipe row, including its denormalized counters."""

    id: UUID
    author_id: UUID
    title: str
    description: str | None
    cooking_time: int
    ingredients: list[Ingredient]
    instructions: list[str]
    image: str | None
    average_rating: float = 0.0
    rating_count: int = 0
    like_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def matches(self, tokens: list[str]) -> bool:
        """Return true when any token occurs in the title or an ingredient name."""
        haystacks = [self.title.lower()] + [
            ingredient.name.lower() for ingredient in self.ingredients
        ]
        return any(
            token.lower() in haystack for token in tokens for haystack in haystacks
        )
