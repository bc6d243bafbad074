"""Tests for admin authentication."""

from datetime import timedelta

import pytest

from photo_gallery.services.auth import AuthService
from photo_gallery.services.errors import (
    InvalidCredentialsError,
    UnauthenticatedError,
)
from photo_gallery.services.sessions import InMemorySessionStore
from tests.conftest import FakeClock


def _service(clock: FakeClock | None = None) -> AuthService:
    return AuthService(
        session_store=InMemorySessionStore(clock=clock or FakeClock()),
        admin_username="admin",
        admin_password="secret",
    )


def test_login_with_valid_credentials_authenticates() -> None:
    service = _service()

    session = service.login("admin", "secret")

    status = service.auth_status(session.token)
    assert status.authenticated is True
    assert status.username == "admin"
    assert service.require_valid(session.token) == session


@pytest.mark.parametrize(
    ("username", "password"),
    [("admin", "wrong"), ("root", "secret"), ("", ""), ("ADMIN", "secret")],
)
def test_login_rejects_invalid_credentials(username: str, password: str) -> None:
    service = _service()

    with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
        service.login(username, password)


@pytest.mark.parametrize("token", [None, "", "never-issued"])
def test_require_valid_rejects_unknown_tokens(token: str | None) -> None:
    service = _service()

    with pytest.raises(UnauthenticatedError, match="Authentication required"):
        service.require_valid(token)


def test_session_expires_after_a_day() -> None:
    clock = FakeClock()
    service = _service(clock)
    session = service.login("admin", "secret")

    clock.advance(timedelta(hours=23, minutes=59))
    assert service.auth_status(session.token).authenticated is True

    clock.advance(timedelta(minutes=1))
    assert service.auth_status(session.token).authenticated is False
    with pytest.raises(UnauthenticatedError):
        service.require_valid(session.token)


def test_logout_invalidates_session() -> None:
    service = _service()
    session = service.login("admin", "secret")

    service.logout(session.token)

    assert service.auth_status(session.token).authenticated is False
    with pytest.raises(UnauthenticatedError):
        service.require_valid(session.token)


def test_logout_without_token_is_a_noop() -> None:
    service = _service()
    session = service.login("admin", "secret")

    service.logout(None)
    service.logout("unknown")

    assert service.auth_status(session.token).authenticated is True


def test_auth_status_without_token() -> None:
    status = _service().auth_status(None)

    assert status.authenticated is False
    assert status.username is None
