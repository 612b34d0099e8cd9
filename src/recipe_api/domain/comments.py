"""Domain models for recipe comments."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CommentRecord:
    """Represents a comment row."""

    id: UUID
    author_id: UUID
    recipe_id: UUID
    content: str
    created_at: datetime
    updated_at: datetime
