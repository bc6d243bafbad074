"""Request and response models for the HTTP API."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    success: bool
    token: str
    message: str


class AuthStatusResponse(BaseModel):
    authenticated: bool
    username: str | None = None


class MessageResponse(BaseModel):
    message: str


class UploadResponse(BaseModel):
    success: bool
    message: str
    filename: str


class GalleryResponse(BaseModel):
    images: list[str]
