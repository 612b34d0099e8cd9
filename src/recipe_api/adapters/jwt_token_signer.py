"""PyJWT implementation of bearer token signing."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from recipe_api.services.auth import TokenSigner


@dataclass
class JwtTokenSigner(TokenSigner):
    """HMAC-signed JWTs with an expiry claim."""

    secret: str
    algorithm: str = "HS256"
    expires_minutes: int = 60

    def sign(self, claims: dict[str, object]) -> str:
        """Return a signed token carrying the claims and an expiry."""
        now = datetime.now(tz=UTC)
        payload = {
            **claims,
            "iat": now,
            "exp": now + timedelta(minutes=self.expires_minutes),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, object]:
        """Return the claims of a valid token or raise ValueError."""
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as exc:
            raise ValueError(str(exc)) from exc
