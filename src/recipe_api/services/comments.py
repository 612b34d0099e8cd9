"""Comment service with author-only edits."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from recipe_api.domain.comments import CommentRecord
from recipe_api.domain.errors import InvalidInputError, NotFoundError
from recipe_api.services.ownership import ensure_owner
from recipe_api.services.presenters import CommentView, present_comment
from recipe_api.services.recipes import RecipeRepository, load_recipe
from recipe_api.services.users import UserService


class CommentRepository(Protocol):
    """Persistence interface for comments."""

    def create_comment(
        self, recipe_id: UUID, author_id: UUID, content: str
    ) -> CommentRecord:
        """Create a comment and return it."""

    def get_comment(self, comment_id: UUID) -> CommentRecord | None:
        """Return a comment by id, if present."""

    def list_comments(self, recipe_id: UUID) -> list[CommentRecord]:
        """Return comments for a recipe, newest first."""

    def update_comment(
        self, comment_id: UUID, content: str, updated_at: datetime
    ) -> CommentRecord:
        """Replace the comment content and return it."""

    def delete_comment(self, comment_id: UUID) -> None:
        """Delete a comment row."""


@dataclass
class CommentService:
    """Application service for recipe comments."""

    repository: CommentRepository
    recipe_repository: RecipeRepository
    user_service: UserService

    def add_comment(
        self, recipe_id: UUID, author_id: UUID, content: str
    ) -> CommentView:
        """Create a comment on an existing recipe."""
        load_recipe(self.recipe_repository, recipe_id)
        comment = self.repository.create_comment(
            recipe_id, author_id, _clean_content(content)
        )
        return self._present(comment)

    def list_comments(self, recipe_id: UUID) -> list[CommentView]:
        """Return the recipe's comments, newest first."""
        load_recipe(self.recipe_repository, recipe_id)
        comments = sorted(
            self.repository.list_comments(recipe_id),
            key=lambda comment: comment.created_at,
            reverse=True,
        )
        authors = self.user_service.resolve_authors(
            [comment.author_id for comment in comments]
        )
        return [present_comment(comment, authors) for comment in comments]

    def update_comment(
        self, recipe_id: UUID, comment_id: UUID, author_id: UUID, content: str
    ) -> CommentView:
        """Replace the content of the actor's own comment."""
        comment = self._load(recipe_id, comment_id)
        ensure_owner(comment.author_id, author_id, "Not allowed to edit this comment")
        updated = self.repository.update_comment(
            comment_id, _clean_content(content), updated_at=datetime.now(tz=UTC)
        )
        return self._present(updated)

    def delete_comment(
        self, recipe_id: UUID, comment_id: UUID, author_id: UUID
    ) -> None:
        """Delete the actor's own comment."""
        comment = self._load(recipe_id, comment_id)
        ensure_owner(
            comment.author_id, author_id, "Not allowed to delete this comment"
        )
        self.repository.delete_comment(comment_id)

    def _load(self, recipe_id: UUID, comment_id: UUID) -> CommentRecord:
        # The recipe check stops edits through another recipe's path.
        comment = self.repository.get_comment(comment_id)
        if comment is None or comment.recipe_id != recipe_id:
            raise NotFoundError("Comment not found")
        return comment

    def _present(self, comment: CommentRecord) -> CommentView:
        authors = self.user_service.resolve_authors([comment.author_id])
        return present_comment(comment, authors)


def _clean_content(content: str) -> str:
    cleaned = content.strip()
    if not cleaned:
        raise InvalidInputError(
            "Comment content is required",
            errors={"content": "Comment content is required"},
        )
    return cleaned
