"""Catalog filter/sort pipeline for one browsing session."""

import logging
from typing import Optional, Union

from app.application.dtos.car import Car
from app.application.errors import InventoryError
from app.application.use_cases.catalog_filters import apply_type_and_price, parse_price
from app.application.use_cases.inventory_service import InventoryService
from app.domain.value_objects.gearshift import Gearshift
from app.infrastructure.logging.logger import log_catalog_filter, log_event

LOAD_ERROR_MESSAGE = "Failed to load cars. Please try again later."

SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
ALL_GEARSHIFTS = "all"


class CatalogBrowser:
    """Holds the inventory and filter selections of one catalog session.

    Type and price selections are recomputed together over the loaded
    inventory whenever either changes or the inventory is reloaded. Sort,
    gearshift and seats requests take a separate path: they fetch from the
    inventory service and replace the displayed list directly, dropping any
    type/price filtering from it. The selections themselves are kept, so the
    next type or price change recomputes from them again.
    """

    def __init__(self, inventory_service: InventoryService) -> None:
        """
        Initialize catalog browser.

        Args:
            inventory_service: Access layer used for loads, sorts and filters
        """
        self._inventory_service = inventory_service
        self.inventory: list[Car] = []
        self.displayed: list[Car] = []
        self.selected_type: str = ""
        self.selected_max_price: Optional[int] = None
        self.loading: bool = False
        self.error: Optional[str] = None

    def _active_filters(self) -> dict[str, object]:
        return {"type": self.selected_type, "max_price": self.selected_max_price}

    def _recompute(self, action: str) -> None:
        """Recompute the displayed list from inventory and selections."""
        self.displayed = apply_type_and_price(
            self.inventory,
            selected_type=self.selected_type,
            max_price=self.selected_max_price,
        )
        log_catalog_filter(action, self._active_filters(), len(self.displayed))

    async def load(self) -> None:
        """
        Reload the inventory.

        On failure the error message is set and the previous inventory kept.
        """
        self.loading = True
        self.error = None
        try:
            self.inventory = await self._inventory_service.list_all()
        except InventoryError as err:
            log_event("catalog", "load_failed", logging.WARNING, error=str(err))
            self.error = LOAD_ERROR_MESSAGE
        finally:
            self.loading = False
        self._recompute("load")

    async def retry(self) -> None:
        """Retry a failed load."""
        await self.load()

    def select_type(self, car_type: Optional[str]) -> None:
        """
        Select a vehicle type ("" or "all" clears the filter).

        Args:
            car_type: Vehicle type
        """
        self.selected_type = car_type or ""
        self._recompute("select_type")

    def select_max_price(self, max_price: Union[int, str, None]) -> None:
        """
        Select a price ceiling ("" or None clears the filter).

        Args:
            max_price: Ceiling as int or numeric text

        Raises:
            ValueError: If the ceiling is not numeric; selections are unchanged
        """
        self.selected_max_price = parse_price(max_price)
        self._recompute("select_max_price")

    async def apply_sort(self, value: str) -> None:
        """
        Replace the displayed list with a price-sorted full fetch.

        Args:
            value: "price-low", "price-high", or anything else for the
                unfiltered inventory
        """
        try:
            if value == SORT_PRICE_LOW:
                self.displayed = await self._inventory_service.sorted_by_price(True)
            elif value == SORT_PRICE_HIGH:
                self.displayed = await self._inventory_service.sorted_by_price(False)
            else:
                self.displayed = list(self.inventory)
        except InventoryError as err:
            log_event("catalog", "sort_failed", logging.WARNING, sort=value, error=str(err))
            return
        log_catalog_filter("apply_sort", {"sort": value}, len(self.displayed))

    async def apply_gearshift(self, value: str) -> None:
        """
        Replace the displayed list with cars of one gearshift.

        Args:
            value: "Automatic", "Manual", or "all" for the unfiltered inventory

        Raises:
            ValueError: If the value is not a known gearshift
        """
        try:
            if value == ALL_GEARSHIFTS:
                self.displayed = list(self.inventory)
            else:
                self.displayed = await self._inventory_service.by_gearshift(Gearshift(value))
        except InventoryError as err:
            log_event(
                "catalog", "gearshift_failed", logging.WARNING, gearshift=value, error=str(err)
            )
            return
        log_catalog_filter("apply_gearshift", {"gearshift": value}, len(self.displayed))

    async def apply_seats(self, seats: int) -> None:
        """
        Replace the displayed list with cars of at least ``seats`` seats.

        Args:
            seats: Minimum seats, or 0 for the unfiltered inventory
        """
        try:
            if seats == 0:
                self.displayed = list(self.inventory)
            else:
                self.displayed = await self._inventory_service.by_seats_at_least(seats)
        except InventoryError as err:
            log_event("catalog", "seats_failed", logging.WARNING, seats=seats, error=str(err))
            return
        log_catalog_filter("apply_seats", {"seats": seats}, len(self.displayed))
