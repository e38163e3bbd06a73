"""Upload car images use case."""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from app.application.dtos.image import ImageUpload, UploadResult
from app.application.ports.image_storage import ImageStorage
from app.domain.value_objects.image_reference import build_image_path
from app.infrastructure.logging.logger import log_event


def _size_label(size_bytes: int) -> str:
    """Render a byte count as MB or KB when it divides evenly."""
    if size_bytes % (1024 * 1024) == 0:
        return f"{size_bytes // (1024 * 1024)}MB"
    if size_bytes % 1024 == 0:
        return f"{size_bytes // 1024}KB"
    return f"{size_bytes} bytes"


class UploadCarImages:
    """Use case for storing admin-submitted car images."""

    ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "image/webp")
    DEFAULT_MAX_SIZE_BYTES = 5 * 1024 * 1024

    INVALID_TYPE_MESSAGE = "Please select a valid image file (JPEG, PNG, or WebP)"
    TOO_LARGE_MESSAGE = "Image size must be less than {limit}"
    UPLOAD_FAILED_MESSAGE = "Failed to upload image. Please try again."

    def __init__(
        self,
        image_storage: ImageStorage,
        max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize upload use case.

        Args:
            image_storage: Backend image bucket
            max_size_bytes: Largest accepted file size
            clock: Time source used to name uploaded objects
        """
        self._image_storage = image_storage
        self._max_size_bytes = max_size_bytes
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def _rejection(self, upload: ImageUpload) -> Optional[str]:
        """Return why a file is rejected before upload, if it is."""
        if upload.content_type not in self.ALLOWED_CONTENT_TYPES:
            return self.INVALID_TYPE_MESSAGE
        if len(upload.data) > self._max_size_bytes:
            return self.TOO_LARGE_MESSAGE.format(limit=_size_label(self._max_size_bytes))
        return None

    async def execute(self, uploads: list[ImageUpload]) -> UploadResult:
        """
        Upload images one at a time, skipping rejected or failed files.

        Args:
            uploads: Files to store, in display order

        Returns:
            Public URLs of the stored files and messages for skipped ones
        """
        urls: list[str] = []
        errors: list[str] = []

        for upload in uploads:
            rejection = self._rejection(upload)
            if rejection is not None:
                log_event(
                    "storage",
                    "upload_rejected",
                    logging.WARNING,
                    filename=upload.filename,
                    content_type=upload.content_type,
                    size=len(upload.data),
                )
                errors.append(f"{upload.filename}: {rejection}")
                continue

            path = build_image_path(upload.filename, self._clock())
            try:
                url = await self._image_storage.upload(path, upload.data, upload.content_type)
            except Exception as err:
                log_event(
                    "storage",
                    "upload_failed",
                    logging.ERROR,
                    path=path,
                    error_type=type(err).__name__,
                    error=str(err),
                )
                errors.append(f"{upload.filename}: {self.UPLOAD_FAILED_MESSAGE}")
                continue

            log_event("storage", "uploaded", path=path)
            urls.append(url)

        return UploadResult(urls=urls, errors=errors)
