"""Automatic transmission gear selector.

Typical usage:
    transmission = Transmission()
    transmission.shift("drive")
"""

from enum import Enum

from motorcar.core.logging_system import get_logger

logger = get_logger(__name__)


class Gear(Enum):
    """Selector positions."""

    PARK = "park"
    REVERSE = "reverse"
    NEUTRAL = "neutral"
    DRIVE = "drive"

    @classmethod
    def parse(cls, value: "Gear | str") -> "Gear":
        """Accept a Gear or a case-insensitive name such as ``"Drive"`` or ``"D"``.

        Raises:
            ValueError: If the name is not a known gear.
        """
        if isinstance(value, Gear):
            return value

        name = str(value).strip().lower()
        for gear in cls:
            if name in (gear.value, gear.value[0]):
                return gear

        raise ValueError(f"Unknown gear: {value!r}")


class Transmission:
    """Holds the selected gear.

    Examples:
        >>> transmission = Transmission()
        >>> transmission.shift(Gear.DRIVE)
        True
        >>> transmission.shift("d")
        False
        >>> transmission.is_in_motion_gear()
        True
    """

    def __init__(self, gear: Gear | str = Gear.PARK) -> None:
        self._gear = Gear.parse(gear)

    @property
    def gear(self) -> Gear:
        return self._gear

    def shift(self, gear: Gear | str) -> bool:
        """Select a gear.

        Returns:
            True if the gear changed, False if it was already selected.

        Raises:
            ValueError: If gear is an unknown name.
        """
        new_gear = Gear.parse(gear)
        if new_gear is self._gear:
            return False

        logger.debug("Shift %s -> %s", self._gear.name, new_gear.name)
        self._gear = new_gear
        return True

    def is_in_motion_gear(self) -> bool:
        """True when the selected gear moves the car (DRIVE or REVERSE)."""
        return self._gear in (Gear.DRIVE, Gear.REVERSE)

    def __repr__(self) -> str:
        return f"Transmission(gear={self._gear.name})"
