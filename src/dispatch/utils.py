from __future__ import annotations

from typing import Iterable, List, Optional

from .interface import InvalidFloorError, TravelDirection


def validate_floor(value: object, name: str = "floor") -> int:
    """Return ``value`` if it is a positive integer, else raise InvalidFloorError."""

    # bool is an int subclass but never a floor
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidFloorError(name, value)
    return value


def nearest_call(calls: Iterable[int], floor: int) -> Optional[int]:
    """Closest call to ``floor`` in either direction.

    Ties go to the call seen first, so the result follows the iteration
    order of ``calls``.
    """

    return min(calls, key=lambda call: abs(call - floor), default=None)


def calls_in_direction(calls: Iterable[int], floor: int, direction: TravelDirection) -> List[int]:
    """Calls strictly ahead of ``floor`` when travelling in ``direction``."""

    step = direction.step
    if step == 0:
        return list(calls)
    return [call for call in calls if (call - floor) * step > 0]


def nearest_in_direction(calls: Iterable[int], floor: int, direction: TravelDirection) -> Optional[int]:
    ahead = calls_in_direction(calls, floor, direction)
    if not ahead:
        return None
    if direction is TravelDirection.DOWN:
        return max(ahead)
    if direction is TravelDirection.UP:
        return min(ahead)
    return nearest_call(ahead, floor)
