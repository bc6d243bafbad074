"""Command-line entrypoint that runs the API with uvicorn."""

import uvicorn

from photo_gallery.config import Settings


def main() -> None:
    """Serve the ASGI app on the configured host and port."""
    settings = Settings()
    print(f"Photo Gallery listening on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "photo_gallery.api.asgi:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
