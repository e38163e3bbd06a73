"""Pure filter and sort functions over in-memory car lists.

Every function returns a new list and keeps the relative order of the
input, so name ordering from the backend survives filtering and ties in
price sorts.
"""

from typing import Optional, Union

from app.application.dtos.car import Car
from app.domain.value_objects.gearshift import Gearshift

ALL_TYPES = "all"


def _normalize_text(text: str) -> str:
    """Normalize text for matching (case-insensitive, trimmed)."""
    return text.strip().lower()


def parse_price(value: Union[int, str, None]) -> Optional[int]:
    """
    Coerce a price that may arrive as text.

    Args:
        value: Price as int, numeric string, empty string or None

    Returns:
        Integer price, or None when no value was given

    Raises:
        ValueError: If the value is non-empty text that is not an integer
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    return int(text)


def filter_by_type(cars: list[Car], car_type: str) -> list[Car]:
    """Keep cars whose type equals ``car_type``, ignoring case."""
    wanted = _normalize_text(car_type)
    return [car for car in cars if _normalize_text(car.type) == wanted]


def filter_by_gearshift(cars: list[Car], gearshift: Gearshift) -> list[Car]:
    """Keep cars with exactly the given gearshift."""
    return [car for car in cars if car.gearshift == gearshift]


def filter_by_min_seats(cars: list[Car], seats: int) -> list[Car]:
    """Keep cars with at least ``seats`` seats."""
    return [car for car in cars if car.seats >= seats]


def filter_by_max_price(cars: list[Car], max_price: int) -> list[Car]:
    """Keep cars priced at or below ``max_price``."""
    return [car for car in cars if parse_price(car.price_ksh) <= max_price]


def sort_by_price(cars: list[Car], ascending: bool = True) -> list[Car]:
    """
    Sort cars by price.

    ``sorted`` is stable in both directions, so cars with equal prices keep
    their input order whether ``ascending`` is True or False.
    """
    return sorted(cars, key=lambda car: parse_price(car.price_ksh), reverse=not ascending)


def apply_type_and_price(
    cars: list[Car],
    selected_type: Optional[str] = None,
    max_price: Optional[int] = None,
) -> list[Car]:
    """
    Apply the conjunctive catalog filters.

    Args:
        cars: Full inventory
        selected_type: Vehicle type; empty, None or "all" means no constraint
        max_price: Price ceiling; None means no constraint

    Returns:
        Cars matching every active filter
    """
    results = list(cars)

    if selected_type and _normalize_text(selected_type) != ALL_TYPES:
        results = filter_by_type(results, selected_type)

    if max_price is not None:
        results = filter_by_max_price(results, max_price)

    return results
