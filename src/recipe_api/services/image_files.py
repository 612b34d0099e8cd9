"""Stored image files and their cleanup."""

import logging
from typing import Protocol
from uuid import UUID

logger = logging.getLogger(__name__)


class ImageStore(Protocol):
    """Byte storage for recipe images, keyed by filename."""

    def write(self, filename: str, data: bytes) -> None:
        """Store bytes under the filename, replacing any previous content."""

    def read(self, filename: str) -> bytes:
        """Return stored bytes or raise FileNotFoundError."""

    def delete(self, filename: str) -> None:
        """Remove a stored file or raise FileNotFoundError."""


def is_stored_file(image: str | None) -> bool:
    """Return whether a recipe image value names a file in the store."""
    # Inline data URIs live in the recipe row itself.
    return bool(image) and not image.startswith("data:")


def remove_stale_image(
    store: ImageStore, recipe_id: UUID, previous: str | None, current: str | None
) -> bool:
    """Delete the previously stored file once the recipe points elsewhere."""
    if previous == current or not is_stored_file(previous):
        return False
    try:
        store.delete(previous)
    except FileNotFoundError:
        logger.warning(
            "Previous recipe image already missing",
            extra={"recipe_id": str(recipe_id), "image": previous},
        )
        return False
    logger.info(
        "Removed previous recipe image",
        extra={"recipe_id": str(recipe_id), "image": previous},
    )
    return True
