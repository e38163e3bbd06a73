"""Image storage port."""

from abc import ABC, abstractmethod


class ImageStorage(ABC):
    """Port interface for the car image bucket of the backend data service."""

    @abstractmethod
    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """
        Store an object and return its public URL.

        Args:
            path: Storage-relative object path
            data: Object bytes
            content_type: MIME type of the object

        Returns:
            Public URL of the stored object
        """
        pass

    @abstractmethod
    async def remove(self, path: str) -> None:
        """
        Remove an object from the bucket.

        Args:
            path: Storage-relative object path
        """
        pass
