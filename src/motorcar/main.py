"""Motorcar - command line car simulator.

Runs a short scripted session: refuel, start, idle, drive, park and stop,
then prints the car's status as YAML.

Typical usage:
    motorcar
    motorcar --car config/cars/roadster.yaml --idle 120 --drive 40
    python -m motorcar.main --refuel 20 --realtime
"""

import argparse
import sys
from pathlib import Path

import yaml

from motorcar.car import Car, CarBuilder, CarError
from motorcar.core.clock import SimulationClock
from motorcar.core.config import ConfigError, ConfigLoader
from motorcar.core.event_bus import EventBus
from motorcar.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    shutdown_logging,
)
from motorcar.core.resource_path import get_config_path
from motorcar.systems.events import (
    EngineStartedEvent,
    EngineStoppedEvent,
    FuelExhaustedEvent,
    FuelLowEvent,
    GearChangedEvent,
)
from motorcar.systems.transmission import Gear

logger = get_logger(__name__)


def load_settings(path: Path | None = None) -> ConfigLoader:
    """Load CLI settings, falling back to built-in defaults."""
    settings = ConfigLoader(
        {
            "simulation": {"tick_hz": 10},
            "cli": {
                "car": "cars/compact.yaml",
                "idle_seconds": 30.0,
                "drive_km": 25.0,
                "refuel_litres": 0.0,
            },
        }
    )

    path = path or get_config_path("settings.yaml")
    if path.exists():
        settings.merge(ConfigLoader.load(path))
    else:
        logger.debug("No settings file at %s, using defaults", path)

    return settings


class Session:
    """One scripted run of a car."""

    def __init__(self, car: Car, clock: SimulationClock, event_bus: EventBus) -> None:
        self.car = car
        self.clock = clock
        self.event_bus = event_bus
        self.events: list[str] = []

        event_bus.subscribe(EngineStartedEvent, lambda e: self._note("engine started"))
        event_bus.subscribe(
            EngineStoppedEvent, lambda e: self._note(f"engine stopped ({e.reason})")
        )
        event_bus.subscribe(FuelLowEvent, lambda e: self._note(f"low fuel ({e.fuel_level:.3f} L)"))
        event_bus.subscribe(FuelExhaustedEvent, self._on_fuel_exhausted)
        event_bus.subscribe(GearChangedEvent, lambda e: self._note(f"gear {e.new_gear.name}"))

    def _note(self, text: str) -> None:
        self.events.append(f"t={self.clock.now:.1f}s {text}")

    def _on_fuel_exhausted(self, event: FuelExhaustedEvent) -> None:
        self._note("fuel exhausted")
        self.clock.stop()

    def run(self, idle_seconds: float, drive_km: float, refuel: float, realtime: bool) -> float:
        """Run the script and return the distance actually driven.

        Raises:
            CarError: If the engine does not start or the car cannot be driven.
        """
        if refuel > 0:
            self.car.refuel(refuel)

        if not self.car.start():
            raise CarError(f"{self.car.info.describe()} would not start: tank is empty")

        self.clock.run(idle_seconds, realtime=realtime)

        driven = 0.0
        if self.car.engine.running and drive_km > 0:
            self.car.shift(Gear.DRIVE)
            driven = self.car.drive(drive_km)

        self.car.shift(Gear.PARK)
        self.car.stop()
        return driven


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Motorcar - car simulator")

    parser.add_argument("--car", type=Path, help="Car definition YAML file")
    parser.add_argument("--settings", type=Path, help="Settings YAML file")
    parser.add_argument("--log-config", type=Path, help="Logging configuration YAML file")
    parser.add_argument("--idle", type=float, help="Seconds to idle after starting")
    parser.add_argument("--drive", type=float, help="Kilometres to drive")
    parser.add_argument("--refuel", type=float, help="Litres to add before starting")
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Idle in wall-clock time instead of as fast as possible",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)

    try:
        log_config = args.log_config or get_config_path("logging.yaml")
        if log_config.exists():
            initialize_logging(log_config, use_platform_dir=True)
        else:
            initialize_logging(use_platform_dir=True)

        settings = load_settings(args.settings)
        car_path = args.car or get_config_path(settings.get("cli.car"))

        clock = SimulationClock(tick_hz=int(settings.get("simulation.tick_hz", 10)))
        event_bus = EventBus()
        car = CarBuilder(clock, event_bus).build(car_path)

        session = Session(car, clock, event_bus)
        driven = session.run(
            idle_seconds=args.idle if args.idle is not None else settings.get("cli.idle_seconds"),
            drive_km=args.drive if args.drive is not None else settings.get("cli.drive_km"),
            refuel=args.refuel if args.refuel is not None else settings.get("cli.refuel_litres"),
            realtime=args.realtime,
        )

        report = {
            "status": car.status().to_dict(),
            "driven_km": driven,
            "events": session.events,
        }
        print(yaml.safe_dump(report, sort_keys=False), end="")
        return 0

    except (CarError, ConfigError, LoggingError, FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
