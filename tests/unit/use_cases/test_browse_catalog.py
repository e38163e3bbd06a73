"""Unit tests for the CatalogBrowser filter/sort pipeline."""

from typing import Any

import pytest

from app.adapters.outbound.cars.in_memory_car_repository import InMemoryCarRepository
from app.adapters.outbound.storage.in_memory_image_storage import InMemoryImageStorage
from app.application.ports.car_repository import CarRepository
from app.application.use_cases.browse_catalog import LOAD_ERROR_MESSAGE, CatalogBrowser
from app.application.use_cases.inventory_service import InventoryService


class SwitchableCarRepository(InMemoryCarRepository):
    """In-memory car table that can be told to start failing."""

    def __init__(self, rows: list[dict[str, Any]]) -> None:
        super().__init__(rows)
        self.failing = False

    async def select_all(self) -> list[dict[str, Any]]:
        if self.failing:
            raise ConnectionError("backend unreachable")
        return await super().select_all()


def _row(name: str, car_type: str, price: Any, **overrides: Any) -> dict[str, Any]:
    row = {
        "id": name.lower(),
        "name": name,
        "type": car_type,
        "seats": 5,
        "gearshift": "Automatic",
        "price_ksh": price,
        "images": [],
    }
    row.update(overrides)
    return row


@pytest.fixture
def repository() -> SwitchableCarRepository:
    """Inventory of four cars."""
    return SwitchableCarRepository(
        [
            _row("Alpha", "SUV", 500000, seats=7),
            _row("Beta", "Sedan", 300000, gearshift="Manual"),
            _row("Gamma", "SUV", 350000, seats=2),
            _row("Delta", "Hatchback", 250000),
        ]
    )


@pytest.fixture
def browser(repository) -> CatalogBrowser:
    """Catalog browser over the inventory."""
    return CatalogBrowser(InventoryService(repository, InMemoryImageStorage()))


def _names(cars) -> list[str]:
    return [car.name for car in cars]


@pytest.mark.asyncio
async def test_load_displays_full_inventory(browser):
    """Test that loading shows every car in name order."""
    await browser.load()

    assert _names(browser.displayed) == ["Alpha", "Beta", "Delta", "Gamma"]
    assert browser.loading is False
    assert browser.error is None


@pytest.mark.asyncio
async def test_all_type_and_no_ceiling_returns_everything(browser):
    """Test that type "all" and no price ceiling means no constraint."""
    await browser.load()

    browser.select_type("all")
    browser.select_max_price("")

    assert _names(browser.displayed) == _names(browser.inventory)


@pytest.mark.asyncio
async def test_type_filter_is_case_insensitive(browser):
    """Test filtering by vehicle type."""
    await browser.load()

    browser.select_type("suv")

    assert _names(browser.displayed) == ["Alpha", "Gamma"]


@pytest.mark.asyncio
async def test_price_ceiling_coerces_text(browser):
    """Test the price ceiling accepts numeric text and is inclusive."""
    await browser.load()

    browser.select_max_price("300000")

    assert browser.selected_max_price == 300000
    assert _names(browser.displayed) == ["Beta", "Delta"]


@pytest.mark.asyncio
async def test_type_and_price_filters_are_conjunctive():
    """Test SUV over budget and Sedan of the wrong type both drop out."""
    repository = InMemoryCarRepository(
        [_row("Big", "SUV", 500000), _row("Small", "Sedan", 300000)]
    )
    browser = CatalogBrowser(InventoryService(repository, InMemoryImageStorage()))
    await browser.load()

    browser.select_type("SUV")
    browser.select_max_price(400000)

    assert browser.displayed == []


@pytest.mark.asyncio
async def test_car_price_stored_as_text_is_coerced(browser, repository):
    """Test that a price arriving as text still compares numerically."""
    repository._rows["delta"]["price_ksh"] = "250000"
    await browser.load()

    browser.select_max_price(260000)

    assert _names(browser.displayed) == ["Delta"]


@pytest.mark.asyncio
async def test_invalid_ceiling_leaves_state_unchanged(browser):
    """Test a non-numeric ceiling is rejected without changing the selection."""
    await browser.load()
    browser.select_max_price(300000)

    with pytest.raises(ValueError):
        browser.select_max_price("cheap")

    assert browser.selected_max_price == 300000
    assert _names(browser.displayed) == ["Beta", "Delta"]


@pytest.mark.asyncio
async def test_clearing_type_restores_price_only_filter(browser):
    """Test that clearing one filter keeps the other active."""
    await browser.load()
    browser.select_type("SUV")
    browser.select_max_price(400000)
    assert _names(browser.displayed) == ["Gamma"]

    browser.select_type("")

    assert _names(browser.displayed) == ["Beta", "Delta", "Gamma"]


@pytest.mark.asyncio
async def test_sort_drops_active_filters_until_next_selection(browser):
    """Test that sorting shows the full sorted inventory, ignoring type/price selections."""
    await browser.load()
    browser.select_type("SUV")

    await browser.apply_sort("price-low")

    assert _names(browser.displayed) == ["Delta", "Beta", "Gamma", "Alpha"]
    assert browser.selected_type == "SUV"

    browser.select_max_price(600000)

    assert _names(browser.displayed) == ["Alpha", "Gamma"]


@pytest.mark.asyncio
async def test_sort_high_to_low(browser):
    """Test descending price sort."""
    await browser.load()

    await browser.apply_sort("price-high")

    assert _names(browser.displayed) == ["Alpha", "Gamma", "Beta", "Delta"]


@pytest.mark.asyncio
async def test_unknown_sort_shows_inventory(browser):
    """Test that the default sort option restores the unfiltered inventory."""
    await browser.load()
    browser.select_type("SUV")

    await browser.apply_sort("default")

    assert _names(browser.displayed) == ["Alpha", "Beta", "Delta", "Gamma"]


@pytest.mark.asyncio
async def test_gearshift_filter_bypasses_type_selection(browser):
    """Test gearshift requests replace the displayed list directly."""
    await browser.load()
    browser.select_type("SUV")

    await browser.apply_gearshift("Manual")
    assert _names(browser.displayed) == ["Beta"]

    await browser.apply_gearshift("all")
    assert _names(browser.displayed) == ["Alpha", "Beta", "Delta", "Gamma"]


@pytest.mark.asyncio
async def test_unknown_gearshift_raises(browser):
    """Test an unknown gearshift value is rejected."""
    await browser.load()

    with pytest.raises(ValueError):
        await browser.apply_gearshift("Semi-automatic")


@pytest.mark.asyncio
async def test_seats_filter(browser):
    """Test seats requests replace the displayed list, 0 meaning all."""
    await browser.load()

    await browser.apply_seats(6)
    assert _names(browser.displayed) == ["Alpha"]

    await browser.apply_seats(0)
    assert _names(browser.displayed) == ["Alpha", "Beta", "Delta", "Gamma"]


@pytest.mark.asyncio
async def test_load_failure_sets_error_and_keeps_inventory(browser, repository):
    """Test that a failed reload reports an error and keeps the previous inventory."""
    await browser.load()
    repository.failing = True

    await browser.load()

    assert browser.error == LOAD_ERROR_MESSAGE
    assert browser.loading is False
    assert len(browser.inventory) == 4


@pytest.mark.asyncio
async def test_retry_clears_error(browser, repository):
    """Test that retry after recovery clears the error."""
    repository.failing = True
    await browser.load()
    assert browser.error == LOAD_ERROR_MESSAGE
    assert browser.displayed == []

    repository.failing = False
    await browser.retry()

    assert browser.error is None
    assert len(browser.displayed) == 4


@pytest.mark.asyncio
async def test_sort_failure_keeps_displayed_list(browser, repository):
    """Test a failed sort leaves the displayed list unchanged."""
    await browser.load()
    browser.select_type("SUV")
    repository.failing = True

    await browser.apply_sort("price-low")

    assert _names(browser.displayed) == ["Alpha", "Gamma"]
