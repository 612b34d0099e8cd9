"""Tests for registration, login and token authentication."""

from uuid import uuid4

import pytest

from recipe_api.adapters.bcrypt_password_hasher import BcryptPasswordHasher
from recipe_api.adapters.jwt_token_signer import JwtTokenSigner
from recipe_api.domain.errors import AuthTokenInvalidError, InvalidInputError
from recipe_api.services.auth import AuthService
from tests.conftest import JWT_SECRET, InMemoryUserRepository


def _service(repository: InMemoryUserRepository) -> AuthService:
    return AuthService(
        user_repository=repository,
        password_hasher=BcryptPasswordHasher(rounds=4),
        token_signer=JwtTokenSigner(secret=JWT_SECRET),
    )


def test_register_normalizes_email_and_hashes_password() -> None:
    repository = InMemoryUserRepository()
    service = _service(repository)

    token = service.register(" Alice ", " Alice@Recipes.DEV ", "secret123")

    user = repository.get_by_email("alice@recipes.dev")
    assert user is not None
    assert user.name == "Alice"
    assert user.password_hash != "secret123"
    assert service.authenticate(token) == user


def test_register_duplicate_email_rejected() -> None:
    service = _service(InMemoryUserRepository())
    service.register("Alice", "alice@recipes.dev", "secret123")

    with pytest.raises(InvalidInputError, match="Email already in use"):
        service.register("Other", "ALICE@recipes.dev", "secret456")


def test_login_checks_password() -> None:
    repository = InMemoryUserRepository()
    service = _service(repository)
    service.register("Alice", "alice@recipes.dev", "secret123")

    token = service.login("alice@recipes.dev", "secret123")

    assert service.authenticate(token).email == "alice@recipes.dev"
    with pytest.raises(InvalidInputError, match="Invalid credentials"):
        service.login("alice@recipes.dev", "wrong-password")
    with pytest.raises(InvalidInputError, match="Invalid credentials"):
        service.login("nobody@recipes.dev", "secret123")


def test_authenticate_rejects_garbage_token() -> None:
    service = _service(InMemoryUserRepository())

    with pytest.raises(AuthTokenInvalidError):
        service.authenticate("not-a-token")


def test_authenticate_rejects_token_for_deleted_user() -> None:
    service = _service(InMemoryUserRepository())
    token = JwtTokenSigner(secret=JWT_SECRET).sign({"sub": str(uuid4())})

    with pytest.raises(AuthTokenInvalidError, match="Token invalid or expired"):
        service.authenticate(token)


def test_authenticate_rejects_token_without_subject() -> None:
    service = _service(InMemoryUserRepository())
    token = JwtTokenSigner(secret=JWT_SECRET).sign({"role": "user"})

    with pytest.raises(AuthTokenInvalidError):
        service.authenticate(token)
