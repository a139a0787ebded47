"""Simulated clock that drives periodic callbacks.

The clock owns simulated time. Callbacks registered with
``schedule_interval`` fire every ``interval`` simulated seconds while time
is advanced, either in one jump with ``advance`` or in fixed steps with
``run``. Everything happens on the caller's thread.

Typical usage example:
    from motorcar.core.clock import SimulationClock

    clock = SimulationClock(tick_hz=10)
    handle = clock.schedule_interval(tank_burn, 1.0, name="idle_burn")
    clock.advance(5.0)  # tank_burn fires 5 times
    clock.cancel(handle)
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from motorcar.core.logging_system import get_logger

logger = get_logger(__name__)

# Slack for float comparisons of due times, e.g. 10 * 0.1 vs 1.0
_EPSILON = 1e-9


@dataclass(eq=False)
class TimerHandle:
    """A callback registered on the clock.

    Attributes:
        timer_id: Registration sequence number, used to break ties.
        name: Label used in log messages.
        interval: Seconds of simulated time between firings.
        callback: Zero-argument callable.
        origin: Simulated time the timer was scheduled at.
        fire_count: Number of times the callback has fired.
        active: False once the timer has been cancelled.
    """

    timer_id: int
    name: str
    interval: float
    callback: Callable[[], None] = field(repr=False)
    origin: float
    fire_count: int = 0
    active: bool = True

    @property
    def next_due(self) -> float:
        return self.origin + (self.fire_count + 1) * self.interval


class SimulationClock:
    """Single-threaded cooperative timer.

    Due times are computed from the timer's origin and fire count rather
    than accumulated, so long runs do not drift.

    Examples:
        >>> clock = SimulationClock()
        >>> ticks = []
        >>> _ = clock.schedule_interval(lambda: ticks.append(clock.now), 0.5)
        >>> clock.advance(1.5)
        >>> ticks
        [0.5, 1.0, 1.5]
    """

    def __init__(self, tick_hz: int = 10) -> None:
        """Initialize the clock.

        Args:
            tick_hz: Steps per simulated second used by ``run``.
        """
        if tick_hz <= 0:
            raise ValueError(f"tick_hz must be positive, got {tick_hz}")

        self.tick_hz = tick_hz
        self.tick_dt = 1.0 / tick_hz

        self._now = 0.0
        self._timers: list[TimerHandle] = []
        self._next_id = 0
        self._running = False

    @property
    def now(self) -> float:
        """Current simulated time in seconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of active timers."""
        return len(self._timers)

    def schedule_interval(
        self, callback: Callable[[], None], interval: float, name: str | None = None
    ) -> TimerHandle:
        """Register a callback to fire every ``interval`` seconds.

        The first firing happens ``interval`` seconds from now.

        Raises:
            ValueError: If interval is not positive.
        """
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")

        handle = TimerHandle(
            timer_id=self._next_id,
            name=name or f"timer-{self._next_id}",
            interval=interval,
            callback=callback,
            origin=self._now,
        )
        self._next_id += 1
        self._timers.append(handle)

        logger.debug("Scheduled %s every %.3fs at t=%.3f", handle.name, interval, self._now)
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        """Cancel a timer. Unknown or already cancelled handles are ignored."""
        if not handle.active or not any(t is handle for t in self._timers):
            return

        handle.active = False
        self._timers = [t for t in self._timers if t is not handle]
        logger.debug("Cancelled %s after %d firings", handle.name, handle.fire_count)

    def advance(self, seconds: float) -> None:
        """Move simulated time forward, firing every timer that comes due.

        Timers fire in due-time order, ties broken by registration order.
        A timer that is several intervals behind fires once per interval.

        Raises:
            ValueError: If seconds is negative.
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance clock by negative time: {seconds}")

        target = self._now + seconds

        while True:
            due = self._next_due_timer(target)
            if due is None:
                break

            self._now = max(self._now, due.next_due)
            due.fire_count += 1
            try:
                due.callback()
            except Exception:
                logger.error("Timer %s failed at t=%.3f", due.name, self._now, exc_info=True)
                raise

        self._now = target

    def _next_due_timer(self, target: float) -> TimerHandle | None:
        candidates = [t for t in self._timers if t.next_due <= target + _EPSILON]
        if not candidates:
            return None
        return min(candidates, key=lambda t: (t.next_due, t.timer_id))

    def run(self, duration: float, realtime: bool = False) -> None:
        """Advance the clock in fixed steps for ``duration`` seconds.

        Args:
            duration: Simulated seconds to run for.
            realtime: Sleep between steps so simulated time tracks wall time.
        """
        if duration < 0:
            raise ValueError(f"Duration must not be negative: {duration}")

        self._running = True
        end = self._now + duration
        logger.info("Clock running for %.1fs (realtime=%s)", duration, realtime)

        try:
            while self._running and self._now < end - _EPSILON:
                step_start = time.monotonic()
                self.advance(min(self.tick_dt, end - self._now))
                if realtime:
                    self._limit_step_rate(step_start)

        except KeyboardInterrupt:
            logger.info("Clock interrupted by user at t=%.3f", self._now)

        finally:
            self._running = False
            logger.info("Clock stopped at t=%.3f", self._now)

    def _limit_step_rate(self, step_start: float) -> None:
        sleep_time = self.tick_dt - (time.monotonic() - step_start)
        if sleep_time > 0:
            time.sleep(sleep_time)

    def stop(self) -> None:
        """Stop ``run`` at the end of the current step."""
        self._running = False

    def is_running(self) -> bool:
        return self._running
