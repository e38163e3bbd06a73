"""Car DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.application.dtos.base import DTO, PartialDTO
from app.domain.value_objects.gearshift import Gearshift


class CarDraft(DTO):
    """Car fields as entered in the admin form (no id yet)."""

    name: str
    type: str
    seats: int
    luggage: int = 0
    gearshift: Gearshift
    images: list[str] = Field(default_factory=list)
    price_ksh: int
    top_speed: Optional[str] = None
    brakes_type: Optional[str] = None
    fuel_consumption: Optional[str] = None
    acceleration: Optional[str] = None
    torque: Optional[str] = None
    gas_tank_capacity: Optional[str] = None
    color: Optional[str] = None
    mileage: Optional[str] = None
    year: Optional[str] = None

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "name": "STANDARD (VOLKSWAGEN JETTA)",
                "type": "Sedan",
                "seats": 5,
                "luggage": 2,
                "gearshift": "Automatic",
                "images": [
                    "https://cdn.example.com/storage/v1/object/public/car-images/1718000000000-jetta.jpg"
                ],
                "price_ksh": 1850000,
                "top_speed": "220 km/h",
                "color": "Red",
                "year": "2019",
            }
        }


class Car(CarDraft):
    """Car as stored in the inventory."""

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CarUpdate(PartialDTO):
    """Partial car update; only explicitly set fields are written.

    Fields a stored car cannot be without may be omitted but not set to null.
    """

    name: Optional[str] = None
    type: Optional[str] = None
    seats: Optional[int] = None
    luggage: Optional[int] = None
    gearshift: Optional[Gearshift] = None
    images: Optional[list[str]] = None
    price_ksh: Optional[int] = None
    top_speed: Optional[str] = None
    brakes_type: Optional[str] = None
    fuel_consumption: Optional[str] = None
    acceleration: Optional[str] = None
    torque: Optional[str] = None
    gas_tank_capacity: Optional[str] = None
    color: Optional[str] = None
    mileage: Optional[str] = None
    year: Optional[str] = None

    @field_validator("name", "type", "seats", "luggage", "gearshift", "images", "price_ksh")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null")
        return value
