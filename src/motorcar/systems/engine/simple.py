"""Simple combustion engine.

While running, the engine burns a fixed amount of fuel on every tick of a
periodic clock timer. Running the tank dry stalls it immediately.

Typical usage:
    engine = SimpleEngine(tank, clock, event_bus)
    engine.start()
    clock.advance(10.0)  # ten idle burns at the default 1 s interval
    engine.stop()
"""

from motorcar.core.clock import SimulationClock, TimerHandle
from motorcar.core.event_bus import EventBus
from motorcar.core.logging_system import get_logger
from motorcar.systems.engine.base import EngineState, IEngine
from motorcar.systems.events import (
    EngineStartedEvent,
    EngineStoppedEvent,
    FuelExhaustedEvent,
    FuelLowEvent,
)
from motorcar.systems.fuel import FuelTank, clamp_fuel

logger = get_logger(__name__)


class SimpleEngine(IEngine):
    """Engine with a run flag and a periodic idle burn.

    Behaviour:
    - ``start`` only succeeds with fuel in the tank
    - Exactly one burn timer exists while running
    - ``stop`` cancels the burn timer
    - Emptying the tank, idling or driving, stops the engine with reason
      "fuel_exhausted"
    """

    def __init__(
        self,
        fuel: FuelTank,
        clock: SimulationClock,
        event_bus: EventBus | None = None,
        idle_burn: float = 0.001,
        burn_interval: float = 1.0,
        consumption_per_100km: float = 6.5,
    ) -> None:
        """Initialize the engine.

        Args:
            fuel: Tank the engine draws from.
            clock: Clock that drives the idle burn.
            event_bus: Bus for engine events, optional.
            idle_burn: Litres burned per tick while running.
            burn_interval: Simulated seconds between burn ticks.
            consumption_per_100km: Litres used per 100 km driven.

        Raises:
            ValueError: If a rate is negative or burn_interval is not positive.
        """
        if idle_burn < 0:
            raise ValueError(f"idle_burn must not be negative, got {idle_burn}")
        if burn_interval <= 0:
            raise ValueError(f"burn_interval must be positive, got {burn_interval}")
        if consumption_per_100km < 0:
            raise ValueError(
                f"consumption_per_100km must not be negative, got {consumption_per_100km}"
            )

        self.fuel = fuel
        self.clock = clock
        self.event_bus = event_bus
        self.idle_burn = idle_burn
        self.burn_interval = burn_interval
        self.consumption_per_100km = consumption_per_100km

        self._running = False
        self._burn_timer: TimerHandle | None = None
        self._started_at = 0.0
        self._runtime = 0.0
        self._fuel_burned = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> bool:
        if self._running:
            return True

        if not self.fuel.has_fuel():
            logger.warning("Engine will not start: fuel tank is empty")
            return False

        self._running = True
        self._started_at = self.clock.now
        self._burn_timer = self.clock.schedule_interval(
            self._on_burn_tick, self.burn_interval, name="engine_idle_burn"
        )

        logger.info("Engine started with %.3f L of fuel", self.fuel.level)
        self._publish(EngineStartedEvent(fuel_level=self.fuel.level))
        return True

    def stop(self, reason: str = "ignition_off") -> None:
        if not self._running:
            return

        if self._burn_timer is not None:
            self.clock.cancel(self._burn_timer)
            self._burn_timer = None

        session = self.clock.now - self._started_at
        self._runtime += session
        self._running = False

        logger.info("Engine stopped (%s) after %.1fs", reason, session)
        self._publish(EngineStoppedEvent(reason=reason, runtime_seconds=session))

    def _on_burn_tick(self) -> None:
        self.consume(self.idle_burn)

    def consume(self, amount: float) -> float:
        was_low = self.fuel.is_low()
        burned = self.fuel.burn(amount)
        self._fuel_burned = clamp_fuel(self._fuel_burned + burned)

        if self.fuel.is_empty():
            if self._running:
                logger.warning("Fuel exhausted at t=%.3f, engine stalling", self.clock.now)
                self._publish(FuelExhaustedEvent(sim_time=self.clock.now))
                self.stop(reason="fuel_exhausted")
        elif self.fuel.is_low() and not was_low:
            logger.warning("Low fuel: %.3f L remaining", self.fuel.level)
            self._publish(
                FuelLowEvent(fuel_level=self.fuel.level, threshold=self.fuel.low_fuel_threshold)
            )

        return burned

    def fuel_needed(self, distance: float) -> float:
        if distance < 0:
            raise ValueError(f"Distance must not be negative, got {distance}")
        return distance * self.consumption_per_100km / 100.0

    def get_state(self) -> EngineState:
        runtime = self._runtime
        if self._running:
            runtime += self.clock.now - self._started_at

        return EngineState(
            running=self._running,
            runtime_seconds=round(runtime, 3),
            fuel_burned=self._fuel_burned,
            idle_burn=self.idle_burn,
            burn_interval=self.burn_interval,
        )

    def _publish(self, event) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)

    def __repr__(self) -> str:
        return f"SimpleEngine(running={self._running})"
