"""Events published by car systems on the event bus."""

from dataclasses import dataclass

from motorcar.core.event_bus import Event
from motorcar.systems.transmission import Gear


@dataclass
class EngineStartedEvent(Event):
    """The engine's run flag went from False to True."""

    fuel_level: float = 0.0


@dataclass
class EngineStoppedEvent(Event):
    """The engine stopped.

    Attributes:
        reason: "ignition_off", "fuel_exhausted" or another caller-supplied tag.
        runtime_seconds: Simulated seconds the engine ran this session.
    """

    reason: str = "ignition_off"
    runtime_seconds: float = 0.0


@dataclass
class FuelExhaustedEvent(Event):
    """The tank ran dry while the engine was running."""

    sim_time: float = 0.0


@dataclass
class FuelLowEvent(Event):
    """The fuel level dropped below the low-fuel threshold."""

    fuel_level: float = 0.0
    threshold: float = 0.0


@dataclass
class RefueledEvent(Event):
    added: float = 0.0
    fuel_level: float = 0.0


@dataclass
class GearChangedEvent(Event):
    old_gear: Gear = Gear.PARK
    new_gear: Gear = Gear.PARK


@dataclass
class OdometerUpdatedEvent(Event):
    distance: float = 0.0
    reading: float = 0.0
