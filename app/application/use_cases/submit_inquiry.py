"""Submit inquiry use case."""

from datetime import datetime, timezone

from app.application.dtos.inquiry import Inquiry, InquiryRequest
from app.application.ports.inquiry_repository import InquiryRepository
from app.infrastructure.logging.logger import log_event


class SubmitInquiry:
    """Use case for recording an order/contact message."""

    def __init__(self, inquiry_repository: InquiryRepository) -> None:
        """
        Initialize submit inquiry use case.

        Args:
            inquiry_repository: Where inquiries are stored
        """
        self._inquiry_repository = inquiry_repository

    async def execute(self, request: InquiryRequest) -> Inquiry:
        """
        Execute submit inquiry use case.

        Args:
            request: Validated inquiry request

        Returns:
            Stored inquiry
        """
        inquiry = Inquiry(**request.model_dump(), created_at=datetime.now(timezone.utc))
        stored = await self._inquiry_repository.save(inquiry)
        log_event("inquiry", "submitted", inquiry_id=stored.id, car_id=stored.car_id)
        return stored
