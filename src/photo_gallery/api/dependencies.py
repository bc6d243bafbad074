"""Shared request dependencies for API routers."""

from fastapi import Depends, Header, Query, Request

from photo_gallery.containers import AppContainer
from photo_gallery.domain.sessions import Session

_BEARER_PREFIX = "Bearer "


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def extract_token(
    authorization: str | None = Header(default=None),
    token: str | None = Query(default=None),
) -> str | None:
    """Return the bearer token from the header, falling back to ``?token=``."""
    if authorization and authorization.startswith(_BEARER_PREFIX):
        header_token = authorization.removeprefix(_BEARER_PREFIX).strip()
        if header_token:
            return header_token
    return token or None


async def require_session(
    token: str | None = Depends(extract_token),
    container: AppContainer = Depends(get_container),
) -> Session | None:
    """Enforce a valid session when protected routes are enabled."""
    if not container.settings.auth_required:
        return None
    return container.auth_service.require_valid(token)
