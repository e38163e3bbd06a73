"""Car table port."""

from abc import ABC, abstractmethod
from typing import Any

CarRow = dict[str, Any]


class CarRepository(ABC):
    """Port interface for the ``cars`` table of the backend data service.

    Rows are plain dictionaries keyed by snake_case car field names. The
    backend is trusted: no validation happens at this boundary.
    """

    @abstractmethod
    async def select_all(self) -> list[CarRow]:
        """
        Select every car row, ordered by name ascending.

        Returns:
            List of raw rows
        """
        pass

    @abstractmethod
    async def insert(self, row: CarRow) -> None:
        """
        Insert one car row; the backend assigns the id.

        Args:
            row: Row values without an id
        """
        pass

    @abstractmethod
    async def update(self, car_id: str, fields: CarRow) -> int:
        """
        Update the given fields of one car row.

        Args:
            car_id: Car identifier
            fields: Columns to overwrite

        Returns:
            Number of rows matched by the id (0 or 1)
        """
        pass

    @abstractmethod
    async def delete(self, car_id: str) -> int:
        """
        Delete one car row.

        Args:
            car_id: Car identifier

        Returns:
            Number of rows deleted (0 or 1)
        """
        pass
