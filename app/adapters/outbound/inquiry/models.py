"""SQLAlchemy ORM models for inquiries."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Text

from app.infrastructure.db import Base


class InquiryModel(Base):
    """SQLAlchemy model for inquiries table."""

    __tablename__ = "inquiries"

    id = Column(String, primary_key=True, index=True, default=lambda: uuid4().hex)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    car_id = Column(String, nullable=True, index=True)  # No FK: cars may be deleted later
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
