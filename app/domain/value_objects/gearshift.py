"""Gearshift value object."""

from enum import Enum


class Gearshift(str, Enum):
    """Transmission type of a car."""

    AUTOMATIC = "Automatic"
    MANUAL = "Manual"
