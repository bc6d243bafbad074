"""Filesystem-backed storage for uploaded images."""

from dataclasses import dataclass
from pathlib import Path

from photo_gallery.services.gallery import FileStore


@dataclass
class LocalFileStore(FileStore):
    """Stores each image as a plain file inside a single directory."""

    root: Path

    def ensure_root(self) -> None:
        """Create the uploads directory if it does not exist yet."""
        self.root.mkdir(parents=True, exist_ok=True)

    def list_entries(self) -> list[str]:
        """Return the names of all entries in the directory."""
        return sorted(entry.name for entry in self.root.iterdir())

    def write(self, filename: str, content: bytes) -> None:
        """Write content to the named file, replacing any existing file."""
        (self.root / filename).write_bytes(content)

    def read(self, filename: str) -> bytes:
        """Return the content of the named file."""
        return (self.root / filename).read_bytes()

    def remove(self, filename: str) -> None:
        """Remove the named file."""
        (self.root / filename).unlink()
