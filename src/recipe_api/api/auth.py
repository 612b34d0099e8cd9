"""Registration and login endpoints."""

from fastapi import APIRouter, Request, status

from recipe_api.api.dependencies import get_container
from recipe_api.api.rate_limits import AUTH_LIMIT, limiter
from recipe_api.api.schemas import LoginRequest, RegisterRequest

router = APIRouter(prefix="/auth", tags=["auth"])

_AUTH_LIMIT_MESSAGE = "Too many login attempts. Please try again after 5 minutes."


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit(AUTH_LIMIT, error_message=_AUTH_LIMIT_MESSAGE)
async def register(payload: RegisterRequest, request: Request) -> dict[str, str]:
    """Create an account and return a bearer token."""
    token = get_container(request).auth_service.register(
        name=payload.name, email=payload.email, password=payload.password
    )
    return {"token": token}


@router.post("/login")
@limiter.limit(AUTH_LIMIT, error_message=_AUTH_LIMIT_MESSAGE)
async def login(payload: LoginRequest, request: Request) -> dict[str, str]:
    """Exchange credentials for a bearer token."""
    token = get_container(request).auth_service.login(
        email=payload.email, password=payload.password
    )
    return {"token": token}
