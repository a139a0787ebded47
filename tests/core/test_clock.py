"""Tests for the simulation clock."""

from unittest.mock import patch

import pytest

from motorcar.core.clock import SimulationClock


class TestScheduling:
    """Test timer registration and cancellation."""

    def test_new_clock_starts_at_zero(self) -> None:
        clock = SimulationClock()

        assert clock.now == 0.0
        assert clock.pending == 0
        assert not clock.is_running()

    def test_invalid_tick_rate_raises(self) -> None:
        with pytest.raises(ValueError, match="tick_hz"):
            SimulationClock(tick_hz=0)

    def test_schedule_returns_active_handle(self, clock: SimulationClock) -> None:
        handle = clock.schedule_interval(lambda: None, 1.0, name="burn")

        assert handle.active
        assert handle.name == "burn"
        assert clock.pending == 1

    @pytest.mark.parametrize("interval", [0.0, -1.0])
    def test_non_positive_interval_raises(self, clock: SimulationClock, interval: float) -> None:
        with pytest.raises(ValueError, match="positive"):
            clock.schedule_interval(lambda: None, interval)

    def test_cancel_removes_timer(self, clock: SimulationClock) -> None:
        calls = []
        handle = clock.schedule_interval(lambda: calls.append(1), 1.0)

        clock.cancel(handle)
        clock.advance(5.0)

        assert not handle.active
        assert clock.pending == 0
        assert calls == []

    def test_cancel_twice_is_noop(self, clock: SimulationClock) -> None:
        handle = clock.schedule_interval(lambda: None, 1.0)

        clock.cancel(handle)
        clock.cancel(handle)

        assert clock.pending == 0

    def test_cancel_unknown_handle_is_noop(self, clock: SimulationClock) -> None:
        calls = []
        handle = clock.schedule_interval(lambda: calls.append(clock.now), 1.0)
        other = SimulationClock()

        other.cancel(handle)

        assert handle.active
        assert clock.pending == 1
        clock.advance(2.0)
        assert calls == [1.0, 2.0]

    def test_owner_can_cancel_after_foreign_cancel(self, clock: SimulationClock) -> None:
        calls = []
        handle = clock.schedule_interval(lambda: calls.append(1), 1.0)

        SimulationClock().cancel(handle)
        clock.cancel(handle)
        clock.advance(3.0)

        assert not handle.active
        assert calls == []


class TestAdvance:
    """Test firing behaviour when time moves forward."""

    def test_fires_once_per_interval(self, clock: SimulationClock) -> None:
        times = []
        clock.schedule_interval(lambda: times.append(clock.now), 0.5)

        clock.advance(1.5)

        assert times == [0.5, 1.0, 1.5]
        assert clock.now == 1.5

    def test_not_due_does_not_fire(self, clock: SimulationClock) -> None:
        calls = []
        clock.schedule_interval(lambda: calls.append(1), 1.0)

        clock.advance(0.99)

        assert calls == []

    def test_small_steps_do_not_drift(self, clock: SimulationClock) -> None:
        calls = []
        clock.schedule_interval(lambda: calls.append(1), 1.0)

        for _ in range(100):
            clock.advance(0.1)

        assert len(calls) == 10

    def test_fires_in_due_order_across_timers(self, clock: SimulationClock) -> None:
        order = []
        clock.schedule_interval(lambda: order.append("slow"), 1.0)
        clock.schedule_interval(lambda: order.append("fast"), 0.4)

        clock.advance(1.2)

        assert order == ["fast", "fast", "slow", "fast"]

    def test_ties_use_registration_order(self, clock: SimulationClock) -> None:
        order = []
        clock.schedule_interval(lambda: order.append("first"), 1.0)
        clock.schedule_interval(lambda: order.append("second"), 1.0)

        clock.advance(1.0)

        assert order == ["first", "second"]

    def test_callback_can_cancel_itself(self, clock: SimulationClock) -> None:
        calls = []

        def once() -> None:
            calls.append(clock.now)
            clock.cancel(handle)

        handle = clock.schedule_interval(once, 1.0)
        clock.advance(5.0)

        assert calls == [1.0]

    def test_cancelled_timer_does_not_fire_later_in_same_advance(
        self, clock: SimulationClock
    ) -> None:
        calls = []
        victim = clock.schedule_interval(lambda: calls.append("victim"), 2.0)
        clock.schedule_interval(lambda: clock.cancel(victim), 1.0)

        clock.advance(3.0)

        assert calls == []

    def test_callback_cancels_other_timer_due_at_same_time(self, clock: SimulationClock) -> None:
        calls = []

        def cancel_other() -> None:
            calls.append("first")
            clock.cancel(second)

        clock.schedule_interval(cancel_other, 1.0)
        second = clock.schedule_interval(lambda: calls.append("second"), 1.0)

        clock.advance(3.0)

        assert calls == ["first", "first", "first"]
        assert not second.active

    def test_timer_scheduled_mid_advance_starts_from_its_time(
        self, clock: SimulationClock
    ) -> None:
        times = []

        def spawn() -> None:
            clock.cancel(spawner)
            clock.schedule_interval(lambda: times.append(clock.now), 1.0)

        spawner = clock.schedule_interval(spawn, 1.0)
        clock.advance(3.0)

        assert times == [2.0, 3.0]

    def test_negative_advance_raises(self, clock: SimulationClock) -> None:
        with pytest.raises(ValueError, match="negative"):
            clock.advance(-1.0)

    def test_callback_error_propagates(self, clock: SimulationClock) -> None:
        def broken() -> None:
            raise RuntimeError("boom")

        clock.schedule_interval(broken, 1.0)

        with pytest.raises(RuntimeError, match="boom"):
            clock.advance(1.0)


class TestRun:
    """Test the stepping loop."""

    def test_run_advances_duration(self) -> None:
        clock = SimulationClock(tick_hz=10)
        calls = []
        clock.schedule_interval(lambda: calls.append(1), 1.0)

        clock.run(3.0)

        assert clock.now == pytest.approx(3.0)
        assert len(calls) == 3
        assert not clock.is_running()

    def test_stop_ends_run_early(self) -> None:
        clock = SimulationClock(tick_hz=10)
        clock.schedule_interval(clock.stop, 1.0)

        clock.run(10.0)

        assert clock.now == pytest.approx(1.0)

    def test_realtime_run_sleeps(self) -> None:
        clock = SimulationClock(tick_hz=10)

        with patch("motorcar.core.clock.time.sleep") as sleep:
            clock.run(0.5, realtime=True)

        assert sleep.call_count >= 1

    def test_keyboard_interrupt_stops_cleanly(self) -> None:
        clock = SimulationClock(tick_hz=10)

        def interrupt() -> None:
            raise KeyboardInterrupt

        clock.schedule_interval(interrupt, 0.5)
        clock.run(5.0)

        assert clock.now == pytest.approx(0.5)
        assert not clock.is_running()

    def test_negative_duration_raises(self, clock: SimulationClock) -> None:
        with pytest.raises(ValueError):
            clock.run(-1.0)
