"""Supabase-backed comment repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from recipe_api.domain.comments import CommentRecord
from recipe_api.services.comments import CommentRepository


@dataclass
class SupabaseCommentRepository(CommentRepository):
    """Supabase implementation for comments."""

    client: Client

    def create_comment(
        self, recipe_id: UUID, author_id: UUID, content: str
    ) -> CommentRecord:
        """Create a comment and return it."""
        response = (
            self.client.table("comments")
            .insert(
                {
                    "recipe_id": str(recipe_id),
                    "author_id": str(author_id),
                    "content": content,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create comment")
        return _parse_comment(response.data[0])

    def get_comment(self, comment_id: UUID) -> CommentRecord | None:
        """Return a comment by id, if present."""
        response = (
            self.client.table("comments")
            .select("*")
            .eq("id", str(comment_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_comment(response.data[0])

    def list_comments(self, recipe_id: UUID) -> list[CommentRecord]:
        """Return comments for a recipe, newest first."""
        response = (
            self.client.table("comments")
            .select("*")
            .eq("recipe_id", str(recipe_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_comment(row) for row in response.data or []]

    def update_comment(
        self, comment_id: UUID, content: str, updated_at: datetime
    ) -> CommentRecord:
        """Replace the comment content and return it."""
        response = (
            self.client.table("comments")
            .update({"content": content, "updated_at": updated_at.isoformat()})
            .eq("id", str(comment_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update comment")
        return _parse_comment(response.data[0])

    def delete_comment(self, comment_id: UUID) -> None:
        """Delete a comment row."""
        self.client.table("comments").delete().eq("id", str(comment_id)).execute()


def _parse_comment(row: dict[str, object]) -> CommentRecord:
    created_at = _parse_time(row.get("created_at"))
    return CommentRecord(
        id=UUID(str(row["id"])),
        author_id=UUID(str(row["author_id"])),
        recipe_id=UUID(str(row["recipe_id"])),
        content=str(row.get("content", "")),
        created_at=created_at,
        updated_at=_parse_time(row.get("updated_at"), default=created_at),
    )


def _parse_time(raw: object, default: datetime | None = None) -> datetime:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return default or datetime.now(tz=UTC)
