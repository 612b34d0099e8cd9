"""Per-route rate limits."""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

AUTH_LIMIT = "3 per 5 minutes"
UPLOAD_LIMIT = "10 per hour"
LIKE_LIMIT = "5 per minute"
RATING_LIMIT = "5 per minute"


def rate_limit_key(request: Request) -> str:
    """Key by the authenticated user when known, else by client address."""
    user_id = getattr(request.state, "user_id", None)
    if user_id is not None:
        return f"user:{user_id}"
    return get_remote_address(request)


limiter = Limiter(key_func=rate_limit_key)
