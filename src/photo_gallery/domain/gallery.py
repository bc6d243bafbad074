"""Domain rules for gallery image assets."""

from pathlib import PurePath

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})


def is_image_filename(filename: str) -> bool:
    """Return whether the filename has a recognized image extension."""
    return PurePath(filename).suffix.lower() in IMAGE_EXTENSIONS


def build_stored_filename(timestamp_ms: int, original_name: str) -> str:
    """Prefix the client-supplied name with its upload timestamp."""
    return f"{timestamp_ms}-{original_name}"
