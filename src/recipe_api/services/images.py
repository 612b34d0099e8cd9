"""Recipe image upload and read-back."""

import base64
import binascii
import re
from dataclasses import dataclass
from pathlib import PurePath
from uuid import UUID

from recipe_api.domain.errors import InvalidInputError, NotFoundError
from recipe_api.services.image_files import ImageStore, remove_stale_image
from recipe_api.services.ownership import ensure_owner
from recipe_api.services.recipes import RecipeRepository, load_recipe

DATA_URI_PATTERN = re.compile(r"^data:(image/[a-zA-Z0-9.+-]+);base64,(.*)$", re.DOTALL)
_BASE64_PAYLOAD = re.compile(r"^[A-Za-z0-9+/=]+\s*$")


@dataclass(frozen=True)
class DecodedImage:
    """Bytes and MIME type decoded from a data URI."""

    mime: str
    data: bytes

    @property
    def extension(self) -> str:
        return extension_for_mime(self.mime)


@dataclass
class ImageService:
    """Application service for recipe images."""

    recipe_repository: RecipeRepository
    store: ImageStore

    def upload_image(self, recipe_id: UUID, actor_id: UUID, data_uri: str) -> str:
        """Store the image for the actor's recipe and return its filename."""
        recipe = load_recipe(self.recipe_repository, recipe_id)
        ensure_owner(recipe.author_id, actor_id, "Forbidden")
        image = decode_data_uri(data_uri)
        filename = f"{recipe.id}.{image.extension}"

        remove_stale_image(self.store, recipe.id, recipe.image, filename)
        self.store.write(filename, image.data)
        self.recipe_repository.update_recipe(recipe.id, {"image": filename})
        return filename

    def get_image(self, recipe_id: UUID) -> str:
        """Return the stored recipe image as a data URI."""
        recipe = load_recipe(self.recipe_repository, recipe_id)
        if not recipe.image:
            raise NotFoundError("No image uploaded")
        if recipe.image.startswith("data:"):
            return recipe.image
        try:
            data = self.store.read(recipe.image)
        except FileNotFoundError as exc:
            raise NotFoundError("Image file not found") from exc
        mime = mime_for_extension(PurePath(recipe.image).suffix.lstrip("."))
        encoded = base64.b64encode(data).decode("ascii")
        return f"data:{mime};base64,{encoded}"


def decode_data_uri(data_uri: str) -> DecodedImage:
    """Split a ``data:image/<type>;base64,<payload>`` string into MIME and bytes."""
    match = DATA_URI_PATTERN.match(data_uri)
    if not match:
        raise InvalidInputError("Invalid image data URI")
    mime, payload = match.group(1), match.group(2)
    if not _BASE64_PAYLOAD.match(payload):
        raise InvalidInputError("Invalid Base64 payload")
    try:
        data = base64.b64decode(payload.strip(), validate=True)
    except binascii.Error as exc:
        raise InvalidInputError("Invalid Base64 payload") from exc
    return DecodedImage(mime=mime, data=data)


def extension_for_mime(mime: str) -> str:
    """Map an image MIME type to the file extension used on disk."""
    subtype = mime.split("/", 1)[1]
    if subtype == "svg+xml":
        return "svg"
    if subtype == "jpeg":
        return "jpg"
    return subtype


def mime_for_extension(extension: str) -> str:
    """Map a stored file extension back to its MIME type."""
    if extension == "jpg":
        return "image/jpeg"
    if extension == "svg":
        return "image/svg+xml"
    return f"image/{extension}"

