"""Image storage adapters."""

from app.adapters.outbound.storage.in_memory_image_storage import InMemoryImageStorage
from app.adapters.outbound.storage.s3_image_storage import S3ImageStorage

__all__ = [
    "InMemoryImageStorage",
    "S3ImageStorage",
]
