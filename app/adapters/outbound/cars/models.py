"""SQLAlchemy ORM models for cars."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, Integer, String

from app.infrastructure.db import Base


class CarModel(Base):
    """SQLAlchemy model for cars table.

    Column names follow the existing camelCase schema; attribute names match
    the snake_case row keys used by the application.
    """

    __tablename__ = "cars"

    id = Column(String, primary_key=True, index=True, default=lambda: uuid4().hex)
    name = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)
    seats = Column(Integer, nullable=False)
    luggage = Column(Integer, nullable=False, default=0)
    gearshift = Column(String, nullable=False)
    price_ksh = Column("priceKsh", Integer, nullable=False)
    images = Column(JSON, nullable=True)
    top_speed = Column("topSpeed", String, nullable=True)
    brakes_type = Column("brakesType", String, nullable=True)
    fuel_consumption = Column("fuelConsumption", String, nullable=True)
    acceleration = Column(String, nullable=True)
    torque = Column(String, nullable=True)
    gas_tank_capacity = Column("gasTankCapacity", String, nullable=True)
    color = Column(String, nullable=True)
    mileage = Column(String, nullable=True)
    year = Column(String, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


# Row keys the application may write
WRITABLE_FIELDS = (
    "name",
    "type",
    "seats",
    "luggage",
    "gearshift",
    "price_ksh",
    "images",
    "top_speed",
    "brakes_type",
    "fuel_consumption",
    "acceleration",
    "torque",
    "gas_tank_capacity",
    "color",
    "mileage",
    "year",
)
