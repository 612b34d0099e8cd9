"""Mapping of domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from recipe_api.domain.errors import DomainError, ErrorKind, status_for

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def error_response(
    kind: ErrorKind, message: str, errors: dict[str, str] | None = None
) -> JSONResponse:
    """Build the error body shared by every failure."""
    status_code = status_for(kind)
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "fail" if status_code < 500 else "error",
            "message": message,
            "code": kind.value,
            "errors": errors or {},
        },
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register handlers translating exceptions into error responses."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        return error_response(exc.kind, exc.message, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(
            ErrorKind.INVALID_INPUT, "Validation error", field_errors(exc.errors())
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(
        request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        return error_response(ErrorKind.TOO_MANY_REQUESTS, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(ErrorKind.INTERNAL, "Internal server error")


def field_errors(errors: list[dict[str, object]]) -> dict[str, str]:
    """Flatten pydantic errors to ``dotted.path -> first message``."""
    flattened: dict[str, str] = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in _LOCATION_PREFIXES:
            location = location[1:]
        path = ".".join(location) or "body"
        flattened.setdefault(path, str(error.get("msg", "Invalid value")))
    return flattened
