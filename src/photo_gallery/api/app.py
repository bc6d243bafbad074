"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from photo_gallery.api.auth import router as auth_router
from photo_gallery.api.gallery import router as gallery_router
from photo_gallery.api.pages import router as pages_router
from photo_gallery.app_logging import configure_logging
from photo_gallery.containers import AppContainer
from photo_gallery.services.errors import UnauthenticatedError

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = [
    "Origin",
    "X-Requested-With",
    "Content-Type",
    "Accept",
    "Authorization",
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Serving uploads from %s (auth required: %s)",
            settings.uploads_dir,
            settings.auth_required,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    @app.exception_handler(UnauthenticatedError)
    async def unauthenticated_handler(
        request: Request, exc: UnauthenticatedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"error": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    app.include_router(auth_router)
    app.include_router(gallery_router)
    app.include_router(pages_router)

    app.mount(
        "/uploads",
        StaticFiles(directory=str(settings.uploads_dir), check_dir=False),
        name="uploads",
    )
    if settings.admin_dir is not None and settings.admin_dir.is_dir():
        app.mount(
            "/admin",
            StaticFiles(directory=str(settings.admin_dir), html=True),
            name="admin",
        )
    if settings.site_dir is not None and settings.site_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=str(settings.site_dir), html=True),
            name="site",
        )

    return app
