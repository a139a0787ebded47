"""Base classes for car engines.

Typical usage:
    class MyEngine(IEngine):
        def start(self) -> bool:
            # Set the run flag if fuel is available
            pass
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class EngineState:
    """Snapshot of an engine.

    Attributes:
        running: Run flag.
        runtime_seconds: Total simulated seconds spent running.
        fuel_burned: Total litres consumed, idling and driving.
        idle_burn: Litres burned per burn tick while running.
        burn_interval: Simulated seconds between burn ticks.
    """

    running: bool
    runtime_seconds: float
    fuel_burned: float
    idle_burn: float
    burn_interval: float


class IEngine(ABC):
    """Abstract engine.

    An engine owns its run flag and the periodic fuel burn that goes with
    it. It reads and drains a fuel tank but never refills one.
    """

    @property
    @abstractmethod
    def running(self) -> bool:
        """Whether the engine is running."""

    @abstractmethod
    def start(self) -> bool:
        """Try to start the engine.

        Returns:
            True if the engine is running afterwards. Starting with an
            empty tank leaves the run flag unset.
        """

    @abstractmethod
    def stop(self, reason: str = "ignition_off") -> None:
        """Stop the engine and cancel its fuel burn."""

    @abstractmethod
    def consume(self, amount: float) -> float:
        """Draw fuel for work done, stalling if the tank runs dry.

        Returns:
            Litres actually drawn.
        """

    @abstractmethod
    def fuel_needed(self, distance: float) -> float:
        """Litres required to cover a distance in kilometres."""

    @abstractmethod
    def get_state(self) -> EngineState:
        """Get current engine state."""
