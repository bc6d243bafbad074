"""Error taxonomy for gallery and authentication services."""


class GalleryServiceError(Exception):
    """Base class for errors surfaced to HTTP clients."""


class InvalidCredentialsError(GalleryServiceError):
    """Login details did not match the configured admin identity."""


class UnauthenticatedError(GalleryServiceError):
    """A protected operation was attempted without a valid session."""


class GalleryReadError(GalleryServiceError):
    """The uploads directory could not be listed."""


class InvalidFilenameError(GalleryServiceError):
    """An uploaded file name cannot be stored safely."""


class DeleteFailedError(GalleryServiceError):
    """An image could not be removed from the uploads directory."""


class UploadFailedError(GalleryServiceError):
    """An upload could not be written to the uploads directory."""
