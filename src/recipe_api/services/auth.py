"""Registration, login and bearer token authentication."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_api.domain.errors import AuthTokenInvalidError, InvalidInputError
from recipe_api.domain.models import UserRecord
from recipe_api.services.users import UserRepository

logger = logging.getLogger(__name__)


class PasswordHasher(Protocol):
    """Hashes and checks user passwords."""

    def hash(self, password: str) -> str:
        """Return a salted digest for the password."""

    def verify(self, password: str, digest: str) -> bool:
        """Return true when the password matches the digest."""


class TokenSigner(Protocol):
    """Issues and verifies bearer tokens."""

    def sign(self, claims: dict[str, object]) -> str:
        """Return a signed token carrying the claims."""

    def verify(self, token: str) -> dict[str, object]:
        """Return the claims of a valid token or raise ValueError."""


@dataclass
class AuthService:
    """Application service for account access."""

    user_repository: UserRepository
    password_hasher: PasswordHasher
    token_signer: TokenSigner

    def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a token for it."""
        normalized_email = email.strip().lower()
        if self.user_repository.get_by_email(normalized_email):
            raise InvalidInputError("Email already in use")
        user = self.user_repository.create_user(
            name=name.strip(),
            email=normalized_email,
            password_hash=self.password_hasher.hash(password),
        )
        logger.info("Registered user", extra={"user_id": str(user.id)})
        return self._issue(user)

    def login(self, email: str, password: str) -> str:
        """Check credentials and return a fresh token."""
        user = self.user_repository.get_by_email(email.strip().lower())
        if user is None or not self.password_hasher.verify(
            password, user.password_hash
        ):
            raise InvalidInputError("Invalid credentials")
        return self._issue(user)

    def authenticate(self, token: str) -> UserRecord:
        """Resolve the user behind a bearer token."""
        try:
            claims = self.token_signer.verify(token)
            user_id = UUID(str(claims["sub"]))
        except (ValueError, KeyError) as exc:
            raise AuthTokenInvalidError("Token invalid or expired") from exc
        user = self.user_repository.get_user(user_id)
        if user is None:
            raise AuthTokenInvalidError("Token invalid or expired")
        return user

    def _issue(self, user: UserRecord) -> str:
        return self.token_signer.sign({"sub": str(user.id)})
