"""Gallery resource management over the uploads directory."""

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import Protocol

from photo_gallery.domain.gallery import build_stored_filename, is_image_filename
from photo_gallery.services.errors import (
    DeleteFailedError,
    GalleryReadError,
    InvalidFilenameError,
    UploadFailedError,
)

logger = logging.getLogger(__name__)


def current_millis() -> int:
    """Return the current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


class FileStore(Protocol):
    """Storage interface for image files."""

    def list_entries(self) -> list[str]:
        """Return every entry name in the store."""

    def write(self, filename: str, content: bytes) -> None:
        """Write a file, replacing any existing file with the same name."""

    def read(self, filename: str) -> bytes:
        """Return the content of a file."""

    def remove(self, filename: str) -> None:
        """Remove a file."""


@dataclass
class GalleryService:
    """Lists, stores and deletes images in the uploads directory.

    The directory listing is the only catalog. Stored names carry a
    millisecond prefix, so two uploads with the same original name in the
    same millisecond resolve to one file and the later write wins. There is
    no locking between requests; concurrent deletes and writes follow
    last-write-wins.
    """

    file_store: FileStore
    clock_ms: Callable[[], int] = current_millis

    async def list_all(self) -> list[str]:
        """Return every entry in the uploads directory."""
        try:
            return await asyncio.to_thread(self.file_store.list_entries)
        except OSError as exc:
            logger.warning("Failed to read uploads directory", exc_info=exc)
            raise GalleryReadError("Error reading images") from exc

    async def list_images(self) -> list[str]:
        """Return the entries with a recognized image extension."""
        return [name for name in await self.list_all() if is_image_filename(name)]

    async def store(self, original_name: str, content: bytes) -> str:
        """Write an upload and return the name it was stored under."""
        safe_name = _safe_basename(original_name)
        if safe_name is None:
            raise InvalidFilenameError("Invalid file name")
        stored_name = build_stored_filename(self.clock_ms(), safe_name)
        try:
            await asyncio.to_thread(self.file_store.write, stored_name, content)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to store %s", stored_name, exc_info=exc)
            raise UploadFailedError("Failed to upload image") from exc
        logger.info("Stored upload %s (%d bytes)", stored_name, len(content))
        return stored_name

    async def read(self, filename: str) -> bytes:
        """Return the content of a stored image or raise ``GalleryReadError``."""
        try:
            return await asyncio.to_thread(self.file_store.read, filename)
        except (OSError, ValueError) as exc:
            raise GalleryReadError(f"Error reading {filename!r}") from exc

    async def delete(self, filename: str) -> None:
        """Remove a stored image or raise ``DeleteFailedError``."""
        if _safe_basename(filename) != filename:
            raise DeleteFailedError(f"Refusing to delete {filename!r}")
        try:
            await asyncio.to_thread(self.file_store.remove, filename)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to delete %s", filename, exc_info=exc)
            raise DeleteFailedError(f"Failed to delete {filename!r}") from exc
        logger.info("Deleted %s", filename)


def _safe_basename(name: str) -> str | None:
    """Strip any directory components a client may have sent."""
    # Windows path rules split on both separators.
    base = PureWindowsPath(name).name
    if base in {"", ".", ".."} or "\x00" in base:
        return None
    return base
