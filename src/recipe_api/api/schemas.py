"""Pydantic models for request bodies."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StrictFloat,
    field_validator,
)

from recipe_api.domain.recipes import VALID_UNITS

INLINE_IMAGE_PATTERN = r"^data:image/(png|jpeg|jpg|gif);base64,"
UPLOAD_IMAGE_PATTERN = r"^data:image/(png|jpe?g|gif|svg\+xml);base64,[A-Za-z0-9+/=]+$"


class RegisterRequest(BaseModel):
    """Account registration payload."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        # bcrypt only accepts the first 72 bytes of a password.
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class LoginRequest(BaseModel):
    """Login payload."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class IngredientPayload(BaseModel):
    """Ingredient line as sent by clients."""

    name: str = Field(min_length=1)
    amount: float = Field(ge=0.01)
    unit: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Ingredient name is required")
        return stripped

    @field_validator("unit")
    @classmethod
    def known_unit(cls, value: str) -> str:
        if value not in VALID_UNITS:
            raise ValueError("Invalid unit")
        return value


class RecipeCreateRequest(BaseModel):
    """New recipe payload; instructions are normalized by the service."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    description: str | None = None
    cooking_time: int = Field(alias="cookingTime", ge=1)
    ingredients: list[IngredientPayload] = Field(min_length=1)
    instructions: list[Any]
    image: str | None = Field(default=None, pattern=INLINE_IMAGE_PATTERN)

    def to_payload(self) -> dict[str, object]:
        return self.model_dump()


class RecipeUpdateRequest(BaseModel):
    """Sparse recipe patch; only the keys sent are applied."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    cooking_time: int | None = Field(default=None, alias="cookingTime", ge=1)
    ingredients: list[IngredientPayload] | None = Field(default=None, min_length=1)
    instructions: list[Any] | None = None
    image: str | None = Field(default=None, pattern=INLINE_IMAGE_PATTERN)

    @field_validator(
        "title", "cooking_time", "ingredients", "instructions", mode="before"
    )
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("Field cannot be null")
        return value

    def to_patch(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class RateRequest(BaseModel):
    """Rating payload; ``null`` clears the caller's rating."""

    value: StrictFloat | None


class CommentRequest(BaseModel):
    """Comment payload."""

    content: str = Field(max_length=2000)


class ImageUploadRequest(BaseModel):
    """Recipe image as a base64 data URI."""

    image: str = Field(pattern=UPLOAD_IMAGE_PATTERN)
