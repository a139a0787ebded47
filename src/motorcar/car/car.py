"""Car aggregate composed of single-purpose parts.

The Car holds one instance of each part and forwards calls to them. It
adds only the rules that need more than one part, such as driving, which
needs the engine, transmission, fuel and odometer together.

Typical usage:
    car = Car.create("VIN123", "Toyota", "Corolla", fuel_level=20.0)
    car.start()
    car.shift(Gear.DRIVE)
    car.drive(12.0)
    print(car.status().to_dict())
"""

from dataclasses import asdict, dataclass
from typing import Any

from motorcar.core.clock import SimulationClock
from motorcar.core.event_bus import EventBus
from motorcar.core.logging_system import get_logger
from motorcar.systems.engine import SimpleEngine
from motorcar.systems.events import GearChangedEvent, OdometerUpdatedEvent, RefueledEvent
from motorcar.systems.fuel import FuelTank, clamp_fuel
from motorcar.systems.ignition import Ignition
from motorcar.systems.odometer import Odometer
from motorcar.systems.transmission import Gear, Transmission
from motorcar.systems.vehicle_info import VehicleInfo

logger = get_logger(__name__)


class CarError(Exception):
    """Base class for errors raised by car operations."""


class DriveError(CarError):
    """Raised when the car cannot be driven in its current state."""


class RefuelError(CarError):
    """Raised when refueling is not allowed."""


@dataclass
class CarStatus:
    """Point-in-time snapshot of the whole car."""

    vehicle: str
    fuel_level: float
    fuel_capacity: float
    fuel_warnings: list[str]
    odometer: float
    trip: float
    gear: str
    ignition: str
    engine_running: bool
    engine_runtime_seconds: float
    fuel_burned: float
    sim_time: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class Car:
    """A car assembled from its parts.

    Examples:
        >>> car = Car.create("VIN123", "Toyota", "Corolla", fuel_level=10.0)
        >>> car.start()
        True
        >>> car.shift("drive")
        True
        >>> car.drive(5.0)
        5.0
        >>> car.odometer.reading
        5.0
    """

    def __init__(
        self,
        info: VehicleInfo,
        fuel: FuelTank,
        odometer: Odometer,
        transmission: Transmission,
        engine: SimpleEngine,
        ignition: Ignition,
        event_bus: EventBus | None = None,
    ) -> None:
        self.info = info
        self.fuel = fuel
        self.odometer = odometer
        self.transmission = transmission
        self.engine = engine
        self.ignition = ignition
        self.event_bus = event_bus

        logger.info("Created car: %s", info.describe())

    @classmethod
    def create(
        cls,
        identifier: str,
        manufacturer: str,
        model: str,
        year: int | None = None,
        fuel_capacity: float = 45.0,
        fuel_level: float = 0.0,
        clock: SimulationClock | None = None,
        event_bus: EventBus | None = None,
        **engine_options: float,
    ) -> "Car":
        """Build a car with default parts.

        Extra keyword arguments (idle_burn, burn_interval,
        consumption_per_100km) are passed to the engine.
        """
        clock = clock or SimulationClock()
        fuel = FuelTank(capacity=fuel_capacity, level=fuel_level)
        engine = SimpleEngine(fuel, clock, event_bus, **engine_options)

        return cls(
            info=VehicleInfo(identifier, manufacturer, model, year),
            fuel=fuel,
            odometer=Odometer(),
            transmission=Transmission(),
            engine=engine,
            ignition=Ignition(engine),
            event_bus=event_bus,
        )

    @property
    def clock(self) -> SimulationClock:
        return self.engine.clock

    def start(self) -> bool:
        """Turn the ignition on. Returns whether the engine is running."""
        return self.ignition.turn_on()

    def stop(self) -> None:
        """Turn the ignition off."""
        self.ignition.turn_off()

    def shift(self, gear: Gear | str) -> bool:
        """Select a gear. Returns True if the gear changed."""
        old_gear = self.transmission.gear
        changed = self.transmission.shift(gear)
        if changed:
            self._publish(GearChangedEvent(old_gear=old_gear, new_gear=self.transmission.gear))
        return changed

    def refuel(self, amount: float) -> float:
        """Add fuel, returning the litres actually added.

        Raises:
            RefuelError: If the engine is running.
            ValueError: If amount is negative.
        """
        if self.engine.running:
            raise RefuelError("Cannot refuel while the engine is running")

        added = self.fuel.refuel(amount)
        self._publish(RefueledEvent(added=added, fuel_level=self.fuel.level))
        return added

    def drive(self, distance: float) -> float:
        """Drive a distance in kilometres.

        If the tank holds less fuel than the distance needs, the car covers
        the fraction the fuel allows and the engine stalls.

        Returns:
            Kilometres actually travelled.

        Raises:
            DriveError: If the engine is off or the gear does not move the car.
            ValueError: If distance is negative.
        """
        if distance < 0:
            raise ValueError(f"Distance must not be negative, got {distance}")
        if not self.engine.running:
            raise DriveError("Cannot drive: engine is not running")
        if not self.transmission.is_in_motion_gear():
            raise DriveError(f"Cannot drive in {self.transmission.gear.name}")

        needed = clamp_fuel(self.engine.fuel_needed(distance))
        if needed == 0:
            travelled = distance
        else:
            burned = self.engine.consume(needed)
            if burned < needed:
                travelled = round(distance * burned / needed, 3)
                logger.warning("Ran out of fuel after %.3f of %.3f km", travelled, distance)
            else:
                travelled = distance

        self.odometer.record(travelled)
        self._publish(OdometerUpdatedEvent(distance=travelled, reading=self.odometer.reading))
        return travelled

    def status(self) -> CarStatus:
        fuel_state = self.fuel.get_state()
        engine_state = self.engine.get_state()

        return CarStatus(
            vehicle=self.info.describe(),
            fuel_level=fuel_state.level,
            fuel_capacity=fuel_state.capacity,
            fuel_warnings=fuel_state.warnings,
            odometer=round(self.odometer.reading, 3),
            trip=round(self.odometer.trip, 3),
            gear=self.transmission.gear.name,
            ignition=self.ignition.position.name,
            engine_running=engine_state.running,
            engine_runtime_seconds=engine_state.runtime_seconds,
            fuel_burned=engine_state.fuel_burned,
            sim_time=round(self.clock.now, 3),
        )

    def _publish(self, event) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)

    def __repr__(self) -> str:
        return f"Car({self.info.describe()!r})"
