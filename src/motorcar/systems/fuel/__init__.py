"""Fuel storage package.

Provides the abstract fuel tank interface and a single-tank implementation.
"""

from motorcar.systems.fuel.base import FUEL_PRECISION, FuelState, IFuelTank, clamp_fuel
from motorcar.systems.fuel.tank import FuelTank

__all__ = [
    "FUEL_PRECISION",
    "FuelState",
    "FuelTank",
    "IFuelTank",
    "clamp_fuel",
]
