"""Admin authentication backed by the session store."""

import logging
import secrets
from dataclasses import dataclass

from photo_gallery.domain.sessions import AuthStatus, Session
from photo_gallery.services.errors import (
    InvalidCredentialsError,
    UnauthenticatedError,
)
from photo_gallery.services.sessions import SessionStore

logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Validates the single admin identity and guards protected operations."""

    session_store: SessionStore
    admin_username: str
    admin_password: str

    def login(self, username: str, password: str) -> Session:
        """Return a new session when the credentials match the admin account."""
        username_ok = secrets.compare_digest(
            username.encode("utf-8"), self.admin_username.encode("utf-8")
        )
        password_ok = secrets.compare_digest(
            password.encode("utf-8"), self.admin_password.encode("utf-8")
        )
        if not (username_ok and password_ok):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError("Invalid credentials")
        session = self.session_store.create(username)
        logger.info("Admin %s logged in", username)
        return session

    def logout(self, token: str | None) -> None:
        """Invalidate the token if one was supplied."""
        if token:
            self.session_store.invalidate(token)
            logger.info("Session logged out")

    def auth_status(self, token: str | None) -> AuthStatus:
        """Report whether the token belongs to a live session."""
        if not token:
            return AuthStatus(authenticated=False)
        session = self.session_store.validate(token)
        if session is None:
            return AuthStatus(authenticated=False)
        return AuthStatus(authenticated=True, username=session.username)

    def require_valid(self, token: str | None) -> Session:
        """Return the live session for the token or raise."""
        if not token:
            raise UnauthenticatedError("Authentication required")
        session = self.session_store.validate(token)
        if session is None:
            raise UnauthenticatedError("Authentication required")
        return session
