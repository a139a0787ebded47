"""Tests for the fuel tank."""

import pytest

from motorcar.systems.fuel import FuelTank, IFuelTank, clamp_fuel


class TestFuelTankCreation:
    def test_implements_interface(self) -> None:
        assert isinstance(FuelTank(capacity=40.0), IFuelTank)

    def test_defaults_to_empty(self) -> None:
        tank = FuelTank(capacity=40.0)

        assert tank.level == 0.0
        assert tank.is_empty()
        assert not tank.has_fuel()

    def test_level_rounded_to_three_places(self) -> None:
        tank = FuelTank(capacity=40.0, level=12.34567)

        assert tank.level == 12.346

    @pytest.mark.parametrize("capacity", [0.0, -5.0, 0.0004])
    def test_non_positive_capacity_raises(self, capacity: float) -> None:
        with pytest.raises(ValueError, match="capacity"):
            FuelTank(capacity=capacity)

    def test_initial_level_over_capacity_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds"):
            FuelTank(capacity=40.0, level=41.0)


class TestFuelLevel:
    def test_set_level(self, tank: FuelTank) -> None:
        tank.set_level(3.2)

        assert tank.level == 3.2

    def test_set_negative_level_raises(self, tank: FuelTank) -> None:
        with pytest.raises(ValueError, match="negative"):
            tank.set_level(-0.001)

        assert tank.level == 10.0

    def test_burn_reduces_level(self, tank: FuelTank) -> None:
        burned = tank.burn(0.25)

        assert burned == 0.25
        assert tank.level == 9.75

    def test_burn_never_goes_negative(self, tank: FuelTank) -> None:
        burned = tank.burn(25.0)

        assert burned == 10.0
        assert tank.level == 0.0
        assert tank.is_empty()

    def test_many_small_burns_stay_clamped(self) -> None:
        tank = FuelTank(capacity=1.0, level=0.01)

        for _ in range(15):
            tank.burn(0.001)

        assert tank.level == 0.0

    def test_burn_negative_raises(self, tank: FuelTank) -> None:
        with pytest.raises(ValueError):
            tank.burn(-1.0)

    def test_refuel_adds_fuel(self, tank: FuelTank) -> None:
        added = tank.refuel(5.5)

        assert added == 5.5
        assert tank.level == 15.5

    def test_refuel_stops_at_capacity(self, tank: FuelTank) -> None:
        added = tank.refuel(100.0)

        assert added == 30.0
        assert tank.level == 40.0

    def test_refuel_negative_raises(self, tank: FuelTank) -> None:
        with pytest.raises(ValueError):
            tank.refuel(-2.0)


class TestFuelState:
    def test_state_without_warnings(self, tank: FuelTank) -> None:
        state = tank.get_state()

        assert state.level == 10.0
        assert state.capacity == 40.0
        assert state.percent == 25.0
        assert state.warnings == []

    def test_low_fuel_warning(self, tank: FuelTank) -> None:
        tank.set_level(4.0)

        assert tank.is_low()
        assert tank.get_state().warnings == ["LOW_FUEL"]

    def test_exhausted_warning(self, tank: FuelTank) -> None:
        tank.burn(10.0)

        assert tank.get_state().warnings == ["FUEL_EXHAUSTED"]


def test_clamp_fuel_rounds_to_three_places() -> None:
    assert clamp_fuel(1.23456) == 1.235
    assert clamp_fuel(0.0004) == 0.0
