"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    admin_username: str = "admin"
    admin_password: str = "changeme"
    auth_required: bool = True
    log_level: str = "INFO"
    session_ttl_hours: float = 24
    uploads_dir: Path = Path("uploads")
    templates_dir: Path = _PACKAGE_DIR / "templates"
    site_dir: Path | None = None
    admin_dir: Path | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
