"""Login, logout and session status endpoints."""

import json

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from photo_gallery.api.dependencies import extract_token, get_container
from photo_gallery.api.models import (
    AuthStatusResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)
from photo_gallery.containers import AppContainer
from photo_gallery.services.errors import InvalidCredentialsError

router = APIRouter(prefix="/api", tags=["auth"])

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_login_request(request: Request) -> LoginRequest:
    """Parse credentials from a JSON or form body.

    A missing or malformed body yields empty credentials, which then fail
    the login like any other mismatch.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        data: object = {
            key: value for key, value in form.items() if isinstance(value, str)
        }
    else:
        body = await request.body()
        try:
            data = json.loads(body) if body else {}
        except ValueError:
            data = {}
    try:
        return LoginRequest.model_validate(data)
    except ValidationError:
        return LoginRequest()


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest = Depends(read_login_request),
    container: AppContainer = Depends(get_container),
) -> LoginResponse | JSONResponse:
    """Exchange the admin credentials for a session token."""
    try:
        session = container.auth_service.login(payload.username, payload.password)
    except InvalidCredentialsError as exc:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"error": str(exc)}
        )
    return LoginResponse(success=True, token=session.token, message="Login successful")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    token: str | None = Depends(extract_token),
    container: AppContainer = Depends(get_container),
) -> MessageResponse:
    """Invalidate the caller's session; always succeeds."""
    container.auth_service.logout(token)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/auth/status",
    response_model=AuthStatusResponse,
    response_model_exclude_none=True,
)
async def auth_status(
    token: str | None = Depends(extract_token),
    container: AppContainer = Depends(get_container),
) -> AuthStatusResponse:
    """Report whether the supplied token belongs to a live session."""
    result = container.auth_service.auth_status(token)
    return AuthStatusResponse(
        authenticated=result.authenticated, username=result.username
    )
