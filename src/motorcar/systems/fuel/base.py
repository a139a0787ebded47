"""Base classes for fuel storage.

Typical usage:
    class MyTank(IFuelTank):
        def burn(self, amount: float) -> float:
            # Remove fuel, never going below empty
            pass
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

# Fuel quantities are kept to this many decimal places
FUEL_PRECISION = 3


def clamp_fuel(value: float) -> float:
    """Round a fuel quantity to the stored precision."""
    return round(value, FUEL_PRECISION)


@dataclass
class FuelState:
    """Snapshot of a fuel tank.

    Attributes:
        level: Current fuel quantity in litres.
        capacity: Tank capacity in litres.
        percent: Level as a percentage of capacity.
        warnings: Warning codes (LOW_FUEL, FUEL_EXHAUSTED).
    """

    level: float
    capacity: float
    percent: float
    warnings: list[str] = field(default_factory=list)


class IFuelTank(ABC):
    """Abstract fuel store.

    Implementations own the fuel level and nothing else. Deciding when
    fuel is consumed is left to the engine.
    """

    @property
    @abstractmethod
    def level(self) -> float:
        """Current fuel quantity in litres."""

    @abstractmethod
    def set_level(self, value: float) -> None:
        """Set the fuel level directly.

        Raises:
            ValueError: If value is negative or exceeds capacity.
        """

    @abstractmethod
    def burn(self, amount: float) -> float:
        """Remove fuel, stopping at empty.

        Returns:
            Litres actually removed.
        """

    @abstractmethod
    def refuel(self, amount: float) -> float:
        """Add fuel, stopping at capacity.

        Returns:
            Litres actually added.
        """

    @abstractmethod
    def get_state(self) -> FuelState:
        """Get the current tank state."""

    def has_fuel(self) -> bool:
        return self.level > 0.0

    def is_empty(self) -> bool:
        return not self.has_fuel()
