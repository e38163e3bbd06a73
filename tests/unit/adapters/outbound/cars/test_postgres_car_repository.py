"""Unit tests for Postgres car repository using SQLite in-memory."""

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.cars.postgres_car_repository import PostgresCarRepository
from app.infrastructure.db import Base


def _row(name: str, price: int, **overrides) -> dict:
    row = {
        "name": name,
        "type": "Sedan",
        "seats": 5,
        "luggage": 2,
        "gearshift": "Automatic",
        "price_ksh": price,
        "images": [f"https://cdn.example.com/public/car-images/{name}.jpg"],
    }
    row.update(overrides)
    return row


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
        "app.adapters.outbound.cars.postgres_car_repository.get_db_session",
        get_test_db_session,
    )

    return PostgresCarRepository()


@pytest.mark.asyncio
async def test_insert_and_select_round_trip(repository):
    """Test that inserted rows come back with ids, ordered by name."""
    await repository.insert(_row("Gamma", 200000, top_speed="220 km/h"))
    await repository.insert(_row("Alpha", 500000))

    rows = await repository.select_all()

    assert [row["name"] for row in rows] == ["Alpha", "Gamma"]
    assert all(row["id"] for row in rows)
    assert rows[1]["price_ksh"] == 200000
    assert rows[1]["top_speed"] == "220 km/h"
    assert rows[1]["images"] == ["https://cdn.example.com/public/car-images/Gamma.jpg"]
    assert rows[1]["created_at"].tzinfo is not None


@pytest.mark.asyncio
async def test_columns_use_camel_case_names(repository, sqlite_engine):
    """Test the stored column names match the existing cars schema."""
    await repository.insert(_row("Alpha", 500000, gas_tank_capacity="50 L"))

    with sqlite_engine.connect() as connection:
        result = connection.execute(text('SELECT "priceKsh", "gasTankCapacity" FROM cars'))
        assert result.one() == (500000, "50 L")


@pytest.mark.asyncio
async def test_insert_ignores_unknown_keys(repository):
    """Test that keys outside the schema are not written."""
    await repository.insert({**_row("Alpha", 1), "id": "client-id", "unexpected": True})

    rows = await repository.select_all()
    assert rows[0]["id"] != "client-id"


@pytest.mark.asyncio
async def test_update_partial_fields(repository):
    """Test that update changes only the given fields."""
    await repository.insert(_row("Alpha", 500000))
    car_id = (await repository.select_all())[0]["id"]

    affected = await repository.update(car_id, {"price_ksh": 450000, "images": []})

    row = (await repository.select_all())[0]
    assert affected == 1
    assert row["price_ksh"] == 450000
    assert row["images"] == []
    assert row["type"] == "Sedan"


@pytest.mark.asyncio
async def test_update_missing_id_affects_no_rows(repository):
    """Test that updating an unknown id reports zero rows."""
    assert await repository.update("missing", {"name": "Ghost"}) == 0
    assert await repository.update("missing", {}) == 0


@pytest.mark.asyncio
async def test_update_without_fields_reports_existence(repository):
    """Test that an empty update still reports whether the row exists."""
    await repository.insert(_row("Alpha", 1))
    car_id = (await repository.select_all())[0]["id"]

    assert await repository.update(car_id, {}) == 1


@pytest.mark.asyncio
async def test_delete(repository):
    """Test that delete removes the row and reports the count."""
    await repository.insert(_row("Alpha", 1))
    car_id = (await repository.select_all())[0]["id"]

    assert await repository.delete(car_id) == 1
    assert await repository.delete(car_id) == 0
    assert await repository.select_all() == []
