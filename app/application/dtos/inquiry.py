"""Inquiry DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.application.dtos.base import DTO

DEFAULT_INQUIRY_MESSAGE = "Hello, I would like to know if the unit is still available."


class InquiryRequest(DTO):
    """Contact/order message as submitted by a prospective buyer."""

    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: EmailStr
    message: str = Field(default=DEFAULT_INQUIRY_MESSAGE, min_length=1)
    car_id: Optional[str] = None


class Inquiry(InquiryRequest):
    """Stored inquiry."""

    id: Optional[str] = None
    created_at: datetime
