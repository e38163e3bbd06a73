"""In-memory image storage adapter."""

from app.application.ports.image_storage import ImageStorage
from app.domain.value_objects.image_reference import public_url_for


class InMemoryImageStorage(ImageStorage):
    """In-memory implementation of the image bucket."""

    def __init__(self, public_base_url: str = "memory://car-images") -> None:
        """
        Initialize in-memory storage.

        Args:
            public_base_url: Base used to build public URLs
        """
        self._public_base_url = public_base_url
        self.objects: dict[str, bytes] = {}
        self.content_types: dict[str, str] = {}

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """
        Store an object and return its public URL.

        Raises:
            FileExistsError: If an object already exists at the path
        """
        if path in self.objects:
            raise FileExistsError(f"Object already exists: {path}")
        self.objects[path] = data
        self.content_types[path] = content_type
        return public_url_for(self._public_base_url, path)

    async def remove(self, path: str) -> None:
        """Remove an object; removing a missing object is a no-op."""
        self.objects.pop(path, None)
        self.content_types.pop(path, None)
