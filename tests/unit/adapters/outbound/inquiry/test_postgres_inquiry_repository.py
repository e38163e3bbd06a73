"""Unit tests for Postgres inquiry repository using SQLite in-memory."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.inquiry.postgres_inquiry_repository import PostgresInquiryRepository
from app.application.dtos.inquiry import Inquiry
from app.infrastructure.db import Base


@pytest.fixture
def sqlite_engine():
    """Create SQLite in-memory engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def repository(sqlite_engine, monkeypatch):
    """Create Postgres repository with SQLite in-memory database for testing."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)

    def get_test_db_session():
        return SessionLocal()

    monkeypatch.setattr(
        "app.adapters.outbound.inquiry.postgres_inquiry_repository.get_db_session",
        get_test_db_session,
    )

    return PostgresInquiryRepository()


def _inquiry(name: str, created_at: datetime) -> Inquiry:
    return Inquiry(
        name=name,
        phone="+254700000000",
        email=f"{name.lower()}@example.com",
        car_id="car_001",
        created_at=created_at,
    )


@pytest.mark.asyncio
async def test_save_and_list_round_trip(repository):
    """Test that saved inquiries are listed with ids and aware timestamps."""
    stored = await repository.save(_inquiry("Amina", datetime.now(timezone.utc)))

    inquiries = await repository.list()

    assert stored.id
    assert len(inquiries) == 1
    assert inquiries[0].id == stored.id
    assert inquiries[0].name == "Amina"
    assert inquiries[0].email == "amina@example.com"
    assert inquiries[0].car_id == "car_001"
    assert inquiries[0].created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_list_orders_oldest_first(repository):
    """Test inquiries are listed by creation time."""
    now = datetime.now(timezone.utc)
    await repository.save(_inquiry("Later", now))
    await repository.save(_inquiry("Earlier", now - timedelta(hours=1)))

    inquiries = await repository.list()

    assert [inquiry.name for inquiry in inquiries] == ["Earlier", "Later"]


@pytest.mark.asyncio
async def test_list_empty_repository(repository):
    """Test that listing from empty repository returns empty list."""
    assert await repository.list() == []
