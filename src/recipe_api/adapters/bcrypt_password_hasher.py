"""bcrypt implementation of password hashing."""

from dataclasses import dataclass

import bcrypt

from recipe_api.services.auth import PasswordHasher


@dataclass
class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt digests."""

    rounds: int = 10

    def hash(self, password: str) -> str:
        """Return a salted digest for the password."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, digest: str) -> bool:
        """Return true when the password matches the digest."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            return False
