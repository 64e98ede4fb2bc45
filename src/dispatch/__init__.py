from __future__ import annotations

from .interface import CallStore, InvalidFloorError, TravelDirection
from .store import FloorCallStore
from .utils import calls_in_direction, nearest_call, nearest_in_direction, validate_floor

__all__ = [
    "CallStore",
    "FloorCallStore",
    "InvalidFloorError",
    "TravelDirection",
    "calls_in_direction",
    "nearest_call",
    "nearest_in_direction",
    "validate_floor",
]
