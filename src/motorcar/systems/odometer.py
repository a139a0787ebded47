"""Odometer with a resettable trip meter."""


class Odometer:
    """Distance recorder.

    The total reading only ever grows. The trip reading grows with it and
    can be zeroed independently.

    Examples:
        >>> odo = Odometer(reading=1200.0)
        >>> odo.record(12.5)
        >>> odo.reading, odo.trip
        (1212.5, 12.5)
    """

    def __init__(self, reading: float = 0.0) -> None:
        if reading < 0:
            raise ValueError(f"Odometer reading must not be negative, got {reading}")

        self._reading = float(reading)
        self._trip = 0.0

    @property
    def reading(self) -> float:
        """Total distance in kilometres."""
        return self._reading

    @property
    def trip(self) -> float:
        """Distance since the last ``reset_trip`` in kilometres."""
        return self._trip

    def record(self, distance: float) -> None:
        """Add a travelled distance.

        Raises:
            ValueError: If distance is negative.
        """
        if distance < 0:
            raise ValueError(f"Distance must not be negative, got {distance}")

        self._reading += distance
        self._trip += distance

    def reset_trip(self) -> None:
        self._trip = 0.0

    def __repr__(self) -> str:
        return f"Odometer(reading={self._reading:.1f}, trip={self._trip:.1f})"
