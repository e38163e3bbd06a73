"""Inventory access layer use case."""

from typing import Any, Optional

from app.application.dtos.car import Car, CarDraft, CarUpdate
from app.application.errors import CarNotFoundError, InventoryError
from app.application.ports.car_repository import CarRepository, CarRow
from app.application.ports.image_storage import ImageStorage
from app.application.use_cases.catalog_filters import (
    filter_by_gearshift,
    filter_by_max_price,
    filter_by_min_seats,
    filter_by_type,
    sort_by_price,
)
from app.domain.value_objects.gearshift import Gearshift
from app.domain.value_objects.image_reference import storage_path_of
from app.infrastructure.logging.logger import log_image_removal, log_inventory_operation


def normalize_images(value: Any) -> list[str]:
    """
    Normalize a backend ``images`` value to a list of references.

    Args:
        value: Raw value from the backend row

    Returns:
        List of image references; empty when the value is missing or is not
        a list of references
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item]
    return []


class InventoryService:
    """Mediates every car read and write between inbound adapters and the backend.

    Each operation catches backend failures, logs their detail and raises
    ``InventoryError`` with a fixed message. Derived reads (type, gearshift,
    seats, price) fetch the full inventory and filter or sort it in memory.
    """

    def __init__(self, car_repository: CarRepository, image_storage: ImageStorage) -> None:
        """
        Initialize inventory service.

        Args:
            car_repository: Backend ``cars`` table
            image_storage: Backend image bucket
        """
        self._car_repository = car_repository
        self._image_storage = image_storage

    def _row_to_car(self, row: CarRow) -> Car:
        """Convert a backend row to a Car DTO with normalized images."""
        return Car.model_validate({**row, "images": normalize_images(row.get("images"))})

    async def list_all(self) -> list[Car]:
        """
        Fetch every car, ordered by name.

        Returns:
            List of cars, each with an ``images`` list

        Raises:
            InventoryError: If the backend request fails
        """
        try:
            rows = await self._car_repository.select_all()
            cars = [self._row_to_car(row) for row in rows or []]
        except Exception as err:
            log_inventory_operation("list_all", error=err)
            raise InventoryError("Failed to fetch cars from database") from err

        log_inventory_operation("list_all", results_count=len(cars))
        return cars

    async def get_by_id(self, car_id: str) -> Optional[Car]:
        """
        Find one car for the detail view.

        Args:
            car_id: Car identifier

        Returns:
            The car, or None if no car has that id

        Raises:
            InventoryError: If the backend request fails
        """
        cars = await self.list_all()
        return next((car for car in cars if car.id == car_id), None)

    async def create(self, draft: CarDraft) -> None:
        """
        Insert a new car.

        Args:
            draft: Car fields (the backend assigns the id)

        Raises:
            InventoryError: If the backend request fails
        """
        row = draft.model_dump(mode="json")
        row["images"] = normalize_images(row.get("images"))
        try:
            await self._car_repository.insert(row)
        except Exception as err:
            log_inventory_operation("create", error=err, name=draft.name)
            raise InventoryError("Failed to add car to database") from err

        log_inventory_operation("create", name=draft.name)

    async def update(self, car_id: str, changes: CarUpdate) -> None:
        """
        Apply a partial update to one car.

        Only fields explicitly set on ``changes`` are written. ``images``,
        when set, replaces the stored list wholesale.

        Args:
            car_id: Car identifier
            changes: Fields to overwrite

        Raises:
            CarNotFoundError: If no car has that id
            InventoryError: If the backend request fails
        """
        fields = changes.model_dump(mode="json", exclude_unset=True)
        if "images" in fields:
            fields["images"] = normalize_images(fields["images"])

        try:
            affected = await self._car_repository.update(car_id, fields)
        except Exception as err:
            log_inventory_operation("update", car_id=car_id, error=err)
            raise InventoryError("Failed to update car in database") from err

        if not affected:
            log_inventory_operation("update_not_found", car_id=car_id)
            raise CarNotFoundError(car_id)

        log_inventory_operation("update", car_id=car_id, fields=sorted(fields))

    async def delete(self, car: Car) -> None:
        """
        Delete a car and its stored images.

        Images are removed one at a time, in order, before the row. A failed
        or skipped image removal is logged and does not stop the delete.
        Removed images are not restored if the row deletion then fails.

        Args:
            car: Persisted car to delete

        Raises:
            ValueError: If the car has no id
            InventoryError: If the row deletion fails
        """
        if not car.id:
            raise ValueError("Car must have an id to be deleted")

        for reference in car.images:
            path = storage_path_of(reference)
            if path is None:
                log_image_removal(reference, None)
                continue
            try:
                await self._image_storage.remove(path)
            except Exception as err:
                log_image_removal(reference, path, error=err)
                continue
            log_image_removal(reference, path)

        try:
            deleted = await self._car_repository.delete(car.id)
        except Exception as err:
            log_inventory_operation("delete", car_id=car.id, error=err)
            raise InventoryError("Failed to delete car from database") from err

        log_inventory_operation("delete", car_id=car.id, rows_deleted=deleted)

    async def by_type(self, car_type: str) -> list[Car]:
        """
        Get cars of one type (case-insensitive).

        Args:
            car_type: Vehicle type, e.g. "SUV"

        Returns:
            Matching cars in name order

        Raises:
            InventoryError: If the backend request fails
        """
        try:
            cars = await self.list_all()
        except InventoryError as err:
            log_inventory_operation("by_type", error=err, car_type=car_type)
            raise InventoryError("Failed to filter cars by type") from err
        return filter_by_type(cars, car_type)

    async def by_gearshift(self, gearshift: Gearshift) -> list[Car]:
        """
        Get cars with the given gearshift.

        Args:
            gearshift: Automatic or Manual

        Returns:
            Matching cars in name order

        Raises:
            InventoryError: If the backend request fails
        """
        try:
            cars = await self.list_all()
        except InventoryError as err:
            log_inventory_operation("by_gearshift", error=err, gearshift=gearshift.value)
            raise InventoryError("Failed to filter cars by gearshift") from err
        return filter_by_gearshift(cars, gearshift)

    async def by_seats_at_least(self, seats: int) -> list[Car]:
        """
        Get cars with at least the given number of seats.

        Args:
            seats: Inclusive lower bound

        Returns:
            Matching cars in name order

        Raises:
            InventoryError: If the backend request fails
        """
        try:
            cars = await self.list_all()
        except InventoryError as err:
            log_inventory_operation("by_seats_at_least", error=err, seats=seats)
            raise InventoryError("Failed to filter cars by seats") from err
        return filter_by_min_seats(cars, seats)

    async def by_max_price(self, max_price: int) -> list[Car]:
        """
        Get cars priced at or below a ceiling.

        Args:
            max_price: Inclusive price ceiling in KSh

        Returns:
            Matching cars in name order

        Raises:
            InventoryError: If the backend request fails
        """
        try:
            cars = await self.list_all()
        except InventoryError as err:
            log_inventory_operation("by_max_price", error=err, max_price=max_price)
            raise InventoryError("Failed to filter cars by max price") from err
        return filter_by_max_price(cars, max_price)

    async def sorted_by_price(self, ascending: bool = True) -> list[Car]:
        """
        Get every car sorted by price.

        Cars with equal prices keep their name order in both directions.

        Args:
            ascending: Cheapest first when True, most expensive first otherwise

        Returns:
            Sorted cars

        Raises:
            InventoryError: If the backend request fails
        """
        try:
            cars = await self.list_all()
        except InventoryError as err:
            log_inventory_operation("sorted_by_price", error=err, ascending=ascending)
            raise InventoryError("Failed to sort cars by price") from err
        return sort_by_price(cars, ascending=ascending)
