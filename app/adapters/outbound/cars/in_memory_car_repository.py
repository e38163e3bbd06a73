"""In-memory car table adapter."""

from copy import deepcopy
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from app.application.ports.car_repository import CarRepository, CarRow


class InMemoryCarRepository(CarRepository):
    """In-memory implementation of the cars table."""

    def __init__(self, rows: Optional[list[CarRow]] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            rows: Optional seed rows; rows without an id get one assigned
        """
        self._rows: dict[str, CarRow] = {}
        for row in rows or []:
            stored = deepcopy(row)
            stored.setdefault("id", uuid4().hex)
            self._rows[stored["id"]] = stored

    async def select_all(self) -> list[CarRow]:
        """
        Select every car row, ordered by name ascending.

        Returns:
            Copies of the stored rows
        """
        rows = sorted(self._rows.values(), key=lambda row: row.get("name") or "")
        return [deepcopy(row) for row in rows]

    async def insert(self, row: CarRow) -> None:
        """
        Insert one car row.

        Args:
            row: Row values without an id
        """
        now = datetime.now(timezone.utc)
        stored = deepcopy(row)
        stored["id"] = uuid4().hex
        stored["created_at"] = now
        stored["updated_at"] = now
        self._rows[stored["id"]] = stored

    async def update(self, car_id: str, fields: CarRow) -> int:
        """
        Update the given fields of one car row.

        Args:
            car_id: Car identifier
            fields: Columns to overwrite

        Returns:
            1 if the row exists, 0 otherwise
        """
        stored = self._rows.get(car_id)
        if stored is None:
            return 0
        stored.update(deepcopy(fields))
        stored["updated_at"] = datetime.now(timezone.utc)
        return 1

    async def delete(self, car_id: str) -> int:
        """
        Delete one car row.

        Args:
            car_id: Car identifier

        Returns:
            1 if a row was deleted, 0 otherwise
        """
        if self._rows.pop(car_id, None) is None:
            return 0
        return 1
