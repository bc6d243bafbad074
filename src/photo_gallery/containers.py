"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from photo_gallery.adapters.local_file_store import LocalFileStore
from photo_gallery.config import Settings
from photo_gallery.services.auth import AuthService
from photo_gallery.services.gallery import GalleryService
from photo_gallery.services.sessions import InMemorySessionStore, SessionStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_store: SessionStore
    auth_service: AuthService
    gallery_service: GalleryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    file_store = LocalFileStore(resolved_settings.uploads_dir)
    file_store.ensure_root()
    session_store = InMemorySessionStore(
        ttl=timedelta(hours=resolved_settings.session_ttl_hours)
    )
    auth_service = AuthService(
        session_store=session_store,
        admin_username=resolved_settings.admin_username,
        admin_password=resolved_settings.admin_password,
    )
    gallery_service = GalleryService(file_store)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        session_store=session_store,
        auth_service=auth_service,
        gallery_service=gallery_service,
        close_resources=close_resources,
    )
