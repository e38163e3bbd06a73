"""Inquiry repository adapters."""

from app.adapters.outbound.inquiry.in_memory_inquiry_repository import InMemoryInquiryRepository
from app.adapters.outbound.inquiry.postgres_inquiry_repository import PostgresInquiryRepository

__all__ = [
    "InMemoryInquiryRepository",
    "PostgresInquiryRepository",
]
