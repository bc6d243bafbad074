"""In-memory session store with lazy expiry."""

import secrets
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from photo_gallery.domain.sessions import Session

DEFAULT_SESSION_TTL = timedelta(hours=24)
TOKEN_BYTES = 32


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(tz=UTC)


def generate_token() -> str:
    """Return an unguessable, URL-safe session token."""
    return secrets.token_urlsafe(TOKEN_BYTES)


class SessionStore(Protocol):
    """Storage interface for login sessions."""

    def create(self, username: str) -> Session:
        """Create and return a new session for the username."""

    def validate(self, token: str) -> Session | None:
        """Return the session if present and unexpired."""

    def invalidate(self, token: str) -> None:
        """Remove the session for the token, if any."""


@dataclass
class InMemorySessionStore(SessionStore):
    """Process-local session store.

    Expired sessions are evicted when they are next looked up; there is no
    background sweep, so sessions that are never read again after expiry
    stay in memory until the process exits.
    """

    ttl: timedelta = DEFAULT_SESSION_TTL
    clock: Callable[[], datetime] = utc_now
    token_factory: Callable[[], str] = generate_token
    _sessions: dict[str, Session] = field(
        default_factory=dict, init=False, repr=False
    )
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def create(self, username: str) -> Session:
        """Issue a fresh token for the username."""
        with self._lock:
            token = self.token_factory()
            while token in self._sessions:
                token = self.token_factory()
            session = Session(
                token=token,
                username=username,
                expires_at=self.clock() + self.ttl,
            )
            self._sessions[token] = session
            return session

    def validate(self, token: str) -> Session | None:
        """Return a live session, evicting it first if it has expired."""
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(self.clock()):
                del self._sessions[token]
                return None
            return session

    def invalidate(self, token: str) -> None:
        """Remove a session; unknown tokens are ignored."""
        with self._lock:
            self._sessions.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
