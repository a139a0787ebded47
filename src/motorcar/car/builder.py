"""Car builder for loading cars from YAML definitions.

Typical usage:
    builder = CarBuilder(clock, event_bus)
    car = builder.build("config/cars/compact.yaml")

Definition format:
    car:
      info:
        identifier: "MC-0001"
        manufacturer: "Toyota"
        model: "Corolla"
        year: 2024
      fuel:
        capacity: 50.0
        level: 12.5
        low_fuel_threshold: 6.0
      engine:
        idle_burn: 0.001
        burn_interval: 1.0
        consumption_per_100km: 6.2
      odometer:
        reading: 18250.0
      transmission:
        gear: park
"""

from pathlib import Path
from typing import Any

import yaml

from motorcar.car.car import Car
from motorcar.core.clock import SimulationClock
from motorcar.core.event_bus import EventBus
from motorcar.core.logging_system import get_logger
from motorcar.systems.engine import SimpleEngine
from motorcar.systems.fuel import FuelTank
from motorcar.systems.ignition import Ignition
from motorcar.systems.odometer import Odometer
from motorcar.systems.transmission import Transmission
from motorcar.systems.vehicle_info import VehicleInfo

logger = get_logger(__name__)

_ENGINE_OPTIONS = ("idle_burn", "burn_interval", "consumption_per_100km")


def _section(car_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return an optional definition section, treating an empty one as {}."""
    section = car_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Car definition section '{name}' must be a mapping")
    return section


class CarBuilder:
    """Builds fully wired Car instances from definitions.

    All cars built by one builder share its clock and event bus.

    Examples:
        >>> builder = CarBuilder(SimulationClock(), EventBus())
        >>> car = builder.build("config/cars/compact.yaml")
        >>> car.info.manufacturer
        'Toyota'
    """

    def __init__(self, clock: SimulationClock, event_bus: EventBus | None = None) -> None:
        self.clock = clock
        self.event_bus = event_bus

    def build(self, config_path: str | Path) -> Car:
        """Build a car from a YAML definition file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the YAML or the definition is invalid.
        """
        config = self.load_config(config_path)
        logger.info("Building car from: %s", config_path)
        return self.build_from_dict(config)

    def build_from_dict(self, config: dict[str, Any]) -> Car:
        """Build a car from an already parsed definition.

        Raises:
            ValueError: If the definition is invalid.
        """
        if not isinstance(config, dict) or not isinstance(config.get("car"), dict):
            raise ValueError("Car definition must have a top-level 'car' section")

        car_config = config["car"]
        if "info" not in car_config:
            raise ValueError("Car definition missing 'info' section")

        if not isinstance(car_config["info"], dict):
            raise ValueError("Car definition section 'info' must be a mapping")
        info = VehicleInfo.from_dict(car_config["info"])

        fuel_config = _section(car_config, "fuel")
        if "capacity" not in fuel_config:
            raise ValueError("Car definition missing 'fuel.capacity'")
        fuel = FuelTank(
            capacity=float(fuel_config["capacity"]),
            level=float(fuel_config.get("level", 0.0)),
            low_fuel_threshold=float(fuel_config.get("low_fuel_threshold", 5.0)),
        )

        engine_config = _section(car_config, "engine")
        unknown = set(engine_config) - set(_ENGINE_OPTIONS)
        if unknown:
            raise ValueError(f"Unknown engine options: {', '.join(sorted(unknown))}")
        engine = SimpleEngine(
            fuel,
            self.clock,
            self.event_bus,
            **{key: float(value) for key, value in engine_config.items()},
        )

        odometer = Odometer(float(_section(car_config, "odometer").get("reading", 0.0)))
        transmission = Transmission(_section(car_config, "transmission").get("gear", "park"))

        car = Car(
            info=info,
            fuel=fuel,
            odometer=odometer,
            transmission=transmission,
            engine=engine,
            ignition=Ignition(engine),
            event_bus=self.event_bus,
        )

        logger.debug("Built %r with fuel %.3f/%.3f", car, fuel.level, fuel.capacity)
        return car

    @staticmethod
    def load_config(config_path: str | Path) -> dict[str, Any]:
        """Read a car definition without building it.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the YAML is invalid or empty.
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Car definition not found: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

        if not config:
            raise ValueError(f"Empty car definition: {config_path}")

        return config
