"""Domain models for admin sessions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Session:
    """Binds an opaque login token to an identity and an expiry."""

    token: str
    username: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Return whether the session is no longer valid at ``now``."""
        return now >= self.expires_at


@dataclass(frozen=True)
class AuthStatus:
    """Non-failing view of a token's authentication state."""

    authenticated: bool
    username: str | None = None
