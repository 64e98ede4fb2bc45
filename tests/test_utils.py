import pytest

from dispatch import (
    InvalidFloorError,
    TravelDirection,
    calls_in_direction,
    nearest_call,
    nearest_in_direction,
    validate_floor,
)


def test_direction_steps_and_opposites():
    assert TravelDirection.UP.step == 1
    assert TravelDirection.DOWN.step == -1
    assert TravelDirection.STATIONARY.step == 0
    assert TravelDirection.UP.opposite is TravelDirection.DOWN
    assert TravelDirection.DOWN.opposite is TravelDirection.UP
    assert TravelDirection.STATIONARY.opposite is TravelDirection.STATIONARY


def test_direction_values_are_boundary_names():
    assert [d.value for d in TravelDirection] == ["Stationary", "Up", "Down"]


def test_nearest_call_prefers_first_seen_on_tie():
    assert nearest_call([9, 5], 7) == 9
    assert nearest_call([5, 9], 7) == 5


def test_nearest_call_on_empty_input():
    assert nearest_call([], 3) is None


def test_calls_in_direction_is_strict():
    calls = [2, 5, 7, 9]
    assert calls_in_direction(calls, 5, TravelDirection.UP) == [7, 9]
    assert calls_in_direction(calls, 5, TravelDirection.DOWN) == [2]
    assert calls_in_direction(calls, 5, TravelDirection.STATIONARY) == calls


def test_nearest_in_direction():
    calls = [3, 9, 15]
    assert nearest_in_direction(calls, 7, TravelDirection.UP) == 9
    assert nearest_in_direction(calls, 7, TravelDirection.DOWN) == 3
    assert nearest_in_direction(calls, 20, TravelDirection.UP) is None


def test_validate_floor():
    assert validate_floor(4) == 4
    with pytest.raises(InvalidFloorError, match="current_floor"):
        validate_floor(-2, "current_floor")
