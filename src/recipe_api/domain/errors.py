"""Typed error taxonomy shared by services and the HTTP layer."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Stable machine-readable error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    AUTH_TOKEN_MISSING = "AUTH_TOKEN_MISSING"
    AUTH_TOKEN_INVALID = "AUTH_TOKEN_INVALID"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    INTERNAL = "INTERNAL"


def status_for(kind: ErrorKind) -> int:  # noqa: PLR0911
    """Return the HTTP status code for an error kind."""
    match kind:
        case ErrorKind.INVALID_INPUT:
            return 400
        case ErrorKind.AUTH_TOKEN_MISSING | ErrorKind.AUTH_TOKEN_INVALID:
            return 401
        case ErrorKind.FORBIDDEN:
            return 403
        case ErrorKind.NOT_FOUND:
            return 404
        case ErrorKind.TOO_MANY_REQUESTS:
            return 429
        case ErrorKind.INTERNAL:
            return 500


class DomainError(Exception):
    """Base error carrying a kind, a client-safe message and field errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        errors: dict[str, str] | None = None,
        kind: ErrorKind | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or {}
        if kind is not None:
            self.kind = kind


class InvalidInputError(DomainError):
    kind = ErrorKind.INVALID_INPUT


class AuthTokenMissingError(DomainError):
    kind = ErrorKind.AUTH_TOKEN_MISSING


class AuthTokenInvalidError(DomainError):
    kind = ErrorKind.AUTH_TOKEN_INVALID


class ForbiddenError(DomainError):
    kind = ErrorKind.FORBIDDEN


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND
