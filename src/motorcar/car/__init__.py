"""Car aggregate and YAML builder."""

from motorcar.car.builder import CarBuilder
from motorcar.car.car import Car, CarError, CarStatus, DriveError, RefuelError

__all__ = [
    "Car",
    "CarBuilder",
    "CarError",
    "CarStatus",
    "DriveError",
    "RefuelError",
]
