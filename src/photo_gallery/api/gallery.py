"""Upload, listing and delete endpoints for the gallery."""

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from photo_gallery.api.dependencies import get_container, require_session
from photo_gallery.api.models import GalleryResponse, MessageResponse, UploadResponse
from photo_gallery.containers import AppContainer
from photo_gallery.services.errors import (
    DeleteFailedError,
    GalleryReadError,
    InvalidFilenameError,
    UploadFailedError,
)

router = APIRouter(tags=["gallery"])


@router.get("/upload", response_class=HTMLResponse)
async def upload_form(request: Request) -> HTMLResponse:
    """Render the upload form."""
    templates = request.app.state.templates
    return templates.TemplateResponse(request, "upload.html")


@router.post(
    "/upload",
    response_model=UploadResponse,
    dependencies=[Depends(require_session)],
)
async def upload(
    photo: UploadFile | None = File(default=None),
    container: AppContainer = Depends(get_container),
) -> UploadResponse | JSONResponse:
    """Store the file sent in the ``photo`` form field."""
    if photo is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "No file uploaded"},
        )
    try:
        content = await photo.read()
    finally:
        await photo.close()
    try:
        stored_name = await container.gallery_service.store(
            photo.filename or "", content
        )
    except InvalidFilenameError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )
    except UploadFailedError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )
    return UploadResponse(
        success=True,
        message="Image uploaded successfully",
        filename=stored_name,
    )


@router.get("/gallery", response_class=HTMLResponse)
async def gallery_page(
    request: Request, container: AppContainer = Depends(get_container)
) -> HTMLResponse:
    """Render every entry of the uploads directory, unfiltered."""
    try:
        images = await container.gallery_service.list_all()
    except GalleryReadError as exc:
        return PlainTextResponse(
            str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    templates = request.app.state.templates
    return templates.TemplateResponse(request, "gallery.html", {"images": images})


@router.get("/api/gallery", response_model=GalleryResponse)
async def gallery_api(
    container: AppContainer = Depends(get_container),
) -> GalleryResponse | JSONResponse:
    """Return the image files of the gallery."""
    try:
        images = await container.gallery_service.list_images()
    except GalleryReadError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )
    return GalleryResponse(images=images)


@router.delete(
    "/api/delete/{filename}",
    response_model=MessageResponse,
    dependencies=[Depends(require_session)],
)
async def delete_image(
    filename: str, container: AppContainer = Depends(get_container)
) -> MessageResponse | JSONResponse:
    """Remove an image from the gallery."""
    try:
        await container.gallery_service.delete(filename)
    except DeleteFailedError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to delete image"},
        )
    return MessageResponse(message="Image deleted successfully")
