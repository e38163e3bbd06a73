"""Image upload DTOs."""

from app.application.dtos.base import DTO


class ImageUpload(DTO):
    """A single image file submitted for upload."""

    filename: str
    content_type: str
    data: bytes


class UploadResult(DTO):
    """Outcome of an image upload batch."""

    urls: list[str]
    errors: list[str]
