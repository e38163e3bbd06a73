"""Car table adapters."""

from app.adapters.outbound.cars.in_memory_car_repository import InMemoryCarRepository
from app.adapters.outbound.cars.postgres_car_repository import PostgresCarRepository

__all__ = [
    "InMemoryCarRepository",
    "PostgresCarRepository",
]
