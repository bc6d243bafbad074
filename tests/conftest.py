"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from photo_gallery.api.app import create_app
from photo_gallery.config import Settings
from photo_gallery.containers import AppContainer, build_container
from photo_gallery.services.gallery import FileStore


@dataclass
class FakeClock:
    """Manually advanced clock for expiry tests."""

    now: datetime = field(default_factory=lambda: datetime(2025, 1, 1, tzinfo=UTC))

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@dataclass
class FakeMillisClock:
    """Millisecond clock that returns a fixed value until changed."""

    value: int = 1_700_000_000_000

    def __call__(self) -> int:
        return self.value


@dataclass
class BrokenFileStore(FileStore):
    """File store whose every operation fails with an OS error."""

    def list_entries(self) -> list[str]:
        raise PermissionError("denied")

    def write(self, filename: str, content: bytes) -> None:
        raise PermissionError("denied")

    def read(self, filename: str) -> bytes:
        raise PermissionError("denied")

    def remove(self, filename: str) -> None:
        raise PermissionError("denied")


@pytest.fixture
def uploads_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def settings(uploads_dir: Path) -> Settings:
    return Settings(
        admin_username="admin",
        admin_password="secret",
        auth_required=True,
        uploads_dir=uploads_dir,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def token(client: TestClient) -> str:
    response = client.post(
        "/api/login", json={"username": "admin", "password": "secret"}
    )
    assert response.status_code == 200
    return response.json()["token"]
