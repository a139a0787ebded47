"""Single fuel tank.

Typical usage:
    tank = FuelTank(capacity=45.0, level=20.0)
    tank.burn(0.001)
    tank.refuel(10.0)
"""

from motorcar.core.logging_system import get_logger
from motorcar.systems.fuel.base import FuelState, IFuelTank, clamp_fuel

logger = get_logger(__name__)


class FuelTank(IFuelTank):
    """Fuel tank with a fixed capacity.

    The level is always rounded to three decimal places and stays within
    ``0 <= level <= capacity``.

    Examples:
        >>> tank = FuelTank(capacity=40.0, level=0.0016)
        >>> tank.level
        0.002
        >>> tank.burn(1.0)
        0.002
        >>> tank.is_empty()
        True
    """

    def __init__(self, capacity: float, level: float = 0.0, low_fuel_threshold: float = 5.0) -> None:
        """Initialize the tank.

        Args:
            capacity: Tank capacity in litres.
            level: Initial fuel level in litres.
            low_fuel_threshold: Level below which LOW_FUEL is reported.

        Raises:
            ValueError: If capacity is not positive, the threshold is negative,
                or level is out of range.
        """
        capacity = clamp_fuel(capacity)
        if capacity <= 0:
            raise ValueError(f"Tank capacity must be positive, got {capacity}")
        if low_fuel_threshold < 0:
            raise ValueError(f"Low fuel threshold must not be negative, got {low_fuel_threshold}")

        self.capacity = capacity
        self.low_fuel_threshold = low_fuel_threshold
        self._level = 0.0
        self.set_level(level)

    @property
    def level(self) -> float:
        return self._level

    def set_level(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"Fuel level must not be negative, got {value}")
        if value > self.capacity:
            raise ValueError(f"Fuel level {value} exceeds tank capacity {self.capacity}")

        self._level = clamp_fuel(value)

    def burn(self, amount: float) -> float:
        if amount < 0:
            raise ValueError(f"Cannot burn a negative amount of fuel: {amount}")

        before = self._level
        self._level = clamp_fuel(max(0.0, before - amount))
        burned = clamp_fuel(before - self._level)

        if self._level == 0.0 and before > 0.0:
            logger.info("Fuel tank empty")
        return burned

    def refuel(self, amount: float) -> float:
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount of fuel: {amount}")

        before = self._level
        self._level = clamp_fuel(min(self.capacity, before + amount))
        added = clamp_fuel(self._level - before)

        if added < amount:
            logger.warning("Tank full: added %.3f of %.3f requested", added, amount)
        logger.debug("Refueled %.3f, level now %.3f", added, self._level)
        return added

    def is_low(self) -> bool:
        return self._level < self.low_fuel_threshold

    def get_state(self) -> FuelState:
        warnings = []
        if self.is_empty():
            warnings.append("FUEL_EXHAUSTED")
        elif self.is_low():
            warnings.append("LOW_FUEL")

        return FuelState(
            level=self._level,
            capacity=self.capacity,
            percent=round(self._level / self.capacity * 100.0, 1),
            warnings=warnings,
        )

    def __repr__(self) -> str:
        return f"FuelTank(level={self._level:.3f}, capacity={self.capacity:.3f})"
