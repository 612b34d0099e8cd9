"""Response shaping: stored records to fixed client-facing views.

Stored rows use snake_case columns and reference users by ``author_id``.
Clients see camelCase keys, a string ``id`` and the author resolved to
``{"id", "name"}``. Password hashes and raw foreign keys never leave here.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from recipe_api.domain.comments import CommentRecord
from recipe_api.domain.models import UserRecord
from recipe_api.domain.recipes import Ingredient, RecipeRecord

UNKNOWN_AUTHOR = "Unknown author"


@dataclass(frozen=True)
class AuthorView:
    """Public projection of a user as a content author."""

    id: UUID
    name: str

    def as_dict(self) -> dict[str, object]:
        return {"id": str(self.id), "name": self.name}


@dataclass(frozen=True)
class UserView:
    """Public projection of a user account."""

    id: UUID
    name: str
    email: str
    created_at: datetime | None

    def as_dict(self) -> dict[str, object]:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "createdAt": _iso(self.created_at),
        }


@dataclass(frozen=True)
class CommentView:
    """Client shape of a comment."""

    id: UUID
    content: str
    author: AuthorView
    recipe_id: UUID
    created_at: datetime
    updated_at: datetime

    def as_dict(self) -> dict[str, object]:
        return {
            "id": str(self.id),
            "content": self.content,
            "author": self.author.as_dict(),
            "recipeId": str(self.recipe_id),
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }


@dataclass(frozen=True)
class RecipeView:
    """Client shape of a recipe; ``comments`` is only set on detail reads."""

    id: UUID
    title: str
    description: str | None
    cooking_time: int
    ingredients: list[Ingredient]
    instructions: list[str]
    image: str | None
    author: AuthorView
    average_rating: float
    rating_count: int
    like_count: int
    editable: bool
    created_at: datetime | None
    updated_at: datetime | None
    comments: list[CommentView] | None = None

    def as_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "cookingTime": self.cooking_time,
            "ingredients": [ingredient.as_dict() for ingredient in self.ingredients],
            "instructions": list(self.instructions),
            "image": self.image,
            "author": self.author.as_dict(),
            "averageRating": self.average_rating,
            "ratingCount": self.rating_count,
            "likeCount": self.like_count,
            "editable": self.editable,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }
        if self.comments is not None:
            data["comments"] = [comment.as_dict() for comment in self.comments]
        return data


def present_author(author_id: UUID, authors: dict[UUID, UserRecord]) -> AuthorView:
    """Resolve an author id, falling back when the user no longer exists."""
    user = authors.get(author_id)
    return AuthorView(id=author_id, name=user.name if user else UNKNOWN_AUTHOR)


def present_user(user: UserRecord) -> UserView:
    return UserView(
        id=user.id, name=user.name, email=user.email, created_at=user.created_at
    )


def present_comment(
    comment: CommentRecord, authors: dict[UUID, UserRecord]
) -> CommentView:
    return CommentView(
        id=comment.id,
        content=comment.content,
        author=present_author(comment.author_id, authors),
        recipe_id=comment.recipe_id,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def present_recipe(
    recipe: RecipeRecord,
    authors: dict[UUID, UserRecord],
    viewer_id: UUID | None,
    comments: list[CommentView] | None = None,
) -> RecipeView:
    """Build the client view of a recipe for the given viewer."""
    return RecipeView(
        id=recipe.id,
        title=recipe.title,
        description=recipe.description,
        cooking_time=recipe.cooking_time,
        ingredients=list(recipe.ingredients),
        instructions=list(recipe.instructions),
        image=recipe.image,
        author=present_author(recipe.author_id, authors),
        average_rating=recipe.average_rating,
        rating_count=recipe.rating_count,
        like_count=recipe.like_count,
        editable=viewer_id is not None and viewer_id == recipe.author_id,
        created_at=recipe.created_at,
        updated_at=recipe.updated_at,
        comments=comments,
    )


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
