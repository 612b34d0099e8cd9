"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from recipe_api.domain.models import UserRecord
from recipe_api.services.users import UserRepository

_COLUMNS = "id, name, email, password_hash, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user for an email address, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_users(self, user_ids: list[UUID]) -> dict[UUID, UserRecord]:
        """Return users keyed by id."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .in_("id", [str(user_id) for user_id in user_ids])
            .execute()
        )
        users = [_parse_user(row) for row in response.data or []]
        return {user.id: user for user in users}

    def list_users(self) -> list[UserRecord]:
        """Return all users, oldest first."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert({"name": name, "email": email, "password_hash": password_hash})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    created_raw = row.get("created_at")
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
        password_hash=str(row.get("password_hash", "")),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
