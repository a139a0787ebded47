"""Pytest configuration and fixtures for all tests."""

import pytest
import yaml

from motorcar.car import Car
from motorcar.core.clock import SimulationClock
from motorcar.core.event_bus import EventBus
from motorcar.core.logging_system import initialize_logging, shutdown_logging
from motorcar.systems.engine import SimpleEngine
from motorcar.systems.fuel import FuelTank


@pytest.fixture(scope="session", autouse=True)
def initialize_test_logging(tmp_path_factory):
    """Send log output to a temporary directory for the whole session."""
    log_dir = tmp_path_factory.mktemp("logs")
    config_file = log_dir / "logging.yaml"
    config_file.write_text(
        yaml.safe_dump(
            {
                "level": "DEBUG",
                "log_dir": str(log_dir),
                "combined_log": {"enabled": True, "filename": "motorcar.log"},
                "console": {"enabled": False},
            }
        ),
        encoding="utf-8",
    )
    initialize_logging(config_file, use_platform_dir=False)

    yield

    shutdown_logging()


@pytest.fixture
def clock() -> SimulationClock:
    return SimulationClock(tick_hz=10)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def tank() -> FuelTank:
    return FuelTank(capacity=40.0, level=10.0, low_fuel_threshold=5.0)


@pytest.fixture
def engine(tank: FuelTank, clock: SimulationClock, event_bus: EventBus) -> SimpleEngine:
    return SimpleEngine(tank, clock, event_bus, idle_burn=0.5, burn_interval=1.0)


@pytest.fixture
def car(clock: SimulationClock, event_bus: EventBus) -> Car:
    return Car.create(
        "VIN123",
        "Toyota",
        "Corolla",
        year=2024,
        fuel_capacity=40.0,
        fuel_level=10.0,
        clock=clock,
        event_bus=event_bus,
        idle_burn=0.5,
        burn_interval=1.0,
        consumption_per_100km=10.0,
    )
