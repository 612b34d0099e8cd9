"""Request-scoped dependencies: the container and the acting user."""

import logging

from fastapi import Header, Request

from recipe_api.containers import AppContainer
from recipe_api.domain.errors import AuthTokenMissingError, DomainError
from recipe_api.domain.models import UserRecord

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


async def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UserRecord:
    """Resolve the bearer token to a user or reject the request."""
    token = _bearer_token(authorization)
    if token is None:
        raise AuthTokenMissingError("No token provided")
    user = get_container(request).auth_service.authenticate(token)
    request.state.user_id = user.id
    return user


async def optional_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UserRecord | None:
    """Resolve the bearer token when present; ignore invalid ones."""
    token = _bearer_token(authorization)
    if token is None:
        return None
    try:
        user = get_container(request).auth_service.authenticate(token)
    except DomainError as exc:
        logger.warning("Optional auth failed: %s", exc.message)
        return None
    request.state.user_id = user.id
    return user


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None
