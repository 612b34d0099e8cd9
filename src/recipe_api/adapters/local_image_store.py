"""Filesystem storage for recipe images."""

from dataclasses import dataclass
from pathlib import Path

from recipe_api.services.image_files import ImageStore


@dataclass
class LocalImageStore(ImageStore):
    """Stores image files in a single directory."""

    root: Path

    def write(self, filename: str, data: bytes) -> None:
        """Write bytes to the file, creating the directory on first use."""
        self.root.mkdir(parents=True, exist_ok=True)
        self._path(filename).write_bytes(data)

    def read(self, filename: str) -> bytes:
        """Return the file's bytes."""
        return self._path(filename).read_bytes()

    def delete(self, filename: str) -> None:
        """Remove the file."""
        self._path(filename).unlink()

    def _path(self, filename: str) -> Path:
        # Stored names are "<recipe id>.<ext>"; never follow directories.
        return self.root / Path(filename).name
