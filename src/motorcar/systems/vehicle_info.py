"""Vehicle identification record."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class VehicleInfo:
    """Identity of a car.

    Attributes:
        identifier: Unique vehicle identifier (VIN, fleet number).
        manufacturer: Manufacturer name, e.g. "Toyota".
        model: Model name, e.g. "Corolla".
        year: Model year, if known.
    """

    identifier: str
    manufacturer: str
    model: str
    year: int | None = None

    def __post_init__(self) -> None:
        for name in ("identifier", "manufacturer", "model"):
            if not str(getattr(self, name)).strip():
                raise ValueError(f"Vehicle {name} must not be empty")

    def describe(self) -> str:
        """Human-readable label, e.g. ``"2024 Toyota Corolla (VIN123)"``."""
        label = f"{self.manufacturer} {self.model}"
        if self.year is not None:
            label = f"{self.year} {label}"
        return f"{label} ({self.identifier})"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VehicleInfo":
        """Build from a mapping such as a YAML ``info`` section.

        Raises:
            ValueError: If a required field is missing or empty.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Vehicle info must be a mapping, got {type(data).__name__}")

        try:
            return cls(
                identifier=str(data["identifier"]),
                manufacturer=str(data["manufacturer"]),
                model=str(data["model"]),
                year=int(data["year"]) if data.get("year") is not None else None,
            )
        except KeyError as e:
            raise ValueError(f"Vehicle info missing field: {e.args[0]}") from e
