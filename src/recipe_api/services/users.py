"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_api.domain.errors import NotFoundError
from recipe_api.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user for an email address, if present."""

    def get_users(self, user_ids: list[UUID]) -> dict[UUID, UserRecord]:
        """Return users keyed by id; missing ids are skipped."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user lookups."""

    repository: UserRepository

    def list_users(self) -> list[UserRecord]:
        """Return every registered user."""
        return self.repository.list_users()

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return a user or raise when it does not exist."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def resolve_authors(self, author_ids: list[UUID]) -> dict[UUID, UserRecord]:
        """Load the distinct authors referenced by a batch of rows."""
        unique_ids = list(dict.fromkeys(author_ids))
        if not unique_ids:
            return {}
        return self.repository.get_users(unique_ids)
