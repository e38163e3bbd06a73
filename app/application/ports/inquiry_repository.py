"""Inquiry repository port."""

from abc import ABC, abstractmethod

from app.application.dtos.inquiry import Inquiry


class InquiryRepository(ABC):
    """Port interface for inquiry repository."""

    @abstractmethod
    async def save(self, inquiry: Inquiry) -> Inquiry:
        """
        Save an inquiry.

        Args:
            inquiry: Inquiry DTO to save

        Returns:
            The stored inquiry, with its id assigned
        """
        pass

    @abstractmethod
    async def list(self) -> list[Inquiry]:
        """
        List all inquiries, oldest first.

        Returns:
            List of all inquiries
        """
        pass
