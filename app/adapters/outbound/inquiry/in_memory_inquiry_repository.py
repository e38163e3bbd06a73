"""In-memory inquiry repository adapter."""

from uuid import uuid4

from app.application.dtos.inquiry import Inquiry
from app.application.ports.inquiry_repository import InquiryRepository


class InMemoryInquiryRepository(InquiryRepository):
    """In-memory implementation of inquiry repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: list[Inquiry] = []

    async def save(self, inquiry: Inquiry) -> Inquiry:
        """
        Save an inquiry.

        Args:
            inquiry: Inquiry DTO to save

        Returns:
            The stored inquiry with an id
        """
        stored = inquiry.model_copy(update={"id": inquiry.id or uuid4().hex})
        self._storage.append(stored)
        return stored

    async def list(self) -> list[Inquiry]:
        """
        List all inquiries.

        Returns:
            List of all inquiries
        """
        return self._storage.copy()
