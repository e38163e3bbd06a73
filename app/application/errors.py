"""Application errors surfaced to inbound adapters."""


class InventoryError(Exception):
    """A car inventory operation failed.

    The message is a fixed, user-facing text; the backend failure that
    caused it is kept on ``__cause__``.
    """


class CarNotFoundError(InventoryError):
    """No car exists with the requested id."""

    def __init__(self, car_id: str) -> None:
        super().__init__(f"Car {car_id} not found")
        self.car_id = car_id
