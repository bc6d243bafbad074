"""Tests for container wiring."""

import asyncio
from datetime import timedelta

from photo_gallery.config import Settings
from photo_gallery.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.auth_service.session_store is container.session_store
    assert container.auth_service.admin_password == "secret"
    assert settings.uploads_dir.is_dir()
    asyncio.run(container.close_resources())


def test_session_ttl_comes_from_settings(settings: Settings) -> None:
    settings.session_ttl_hours = 2

    container = build_container(settings)

    assert container.session_store.ttl == timedelta(hours=2)
