from __future__ import annotations

import threading
from typing import Dict, List, Optional

from .interface import TravelDirection
from .utils import nearest_in_direction, validate_floor


class FloorCallStore:
    """Pending floor calls for a single elevator plus the next-stop decision.

    Calls are kept as an ordered set in insertion order. A single lock
    guards every operation, so each one is applied in full or not at all.
    """

    def __init__(self) -> None:
        self._calls: Dict[int, None] = {}
        self._lock = threading.Lock()

    def add_call(self, floor: int) -> None:
        floor = validate_floor(floor, "floor")
        with self._lock:
            self._calls.setdefault(floor, None)

    def list_calls(self) -> List[int]:
        with self._lock:
            return list(self._calls)

    def remove_call(self, floor: int) -> bool:
        floor = validate_floor(floor, "floor")
        with self._lock:
            if floor not in self._calls:
                return False
            del self._calls[floor]
            return True

    def next_stop(
        self,
        current_floor: int,
        direction: TravelDirection = TravelDirection.STATIONARY,
    ) -> Optional[int]:
        current_floor = validate_floor(current_floor, "current_floor")
        direction = TravelDirection(direction)
        with self._lock:
            calls = list(self._calls)

        if not calls:
            return None

        ahead = nearest_in_direction(calls, current_floor, direction)
        if ahead is not None or direction is TravelDirection.STATIONARY:
            return ahead
        # Nothing left ahead: turn around
        return nearest_in_direction(calls, current_floor, direction.opposite)

    def clear(self) -> None:
        with self._lock:
            self._calls.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._calls)

    def __contains__(self, floor: object) -> bool:
        with self._lock:
            return floor in self._calls
