"""Car form validation use case."""

from typing import Union

from app.application.dtos.car import Car, CarDraft


class CarFormValidator:
    """Field-level validation for the admin car form.

    Runs before any inventory call; a draft with errors never reaches the
    access layer.
    """

    MIN_SEATS = 1
    MAX_SEATS = 10

    def validate(self, draft: Union[CarDraft, Car]) -> dict[str, str]:
        """
        Validate a car draft.

        Args:
            draft: Car fields as entered in the form

        Returns:
            Mapping of field name to error message; empty when valid
        """
        errors: dict[str, str] = {}

        if not draft.name.strip():
            errors["name"] = "Car name is required"

        if not draft.type.strip():
            errors["type"] = "Car type is required"

        if draft.seats < self.MIN_SEATS or draft.seats > self.MAX_SEATS:
            errors["seats"] = f"Seats must be between {self.MIN_SEATS} and {self.MAX_SEATS}"

        if not draft.images:
            errors["images"] = "At least one image is required"

        if draft.price_ksh <= 0:
            errors["price_ksh"] = "Price must be greater than 0"

        return errors
