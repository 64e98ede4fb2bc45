from __future__ import annotations

from enum import Enum
from typing import List, Optional, Protocol


class TravelDirection(str, Enum):
    """Current travel state of the elevator, supplied with each query."""

    STATIONARY = "Stationary"
    UP = "Up"
    DOWN = "Down"

    @property
    def step(self) -> int:
        """Return +1 for up, -1 for down, 0 when stationary."""
        if self is TravelDirection.UP:
            return 1
        if self is TravelDirection.DOWN:
            return -1
        return 0

    @property
    def opposite(self) -> "TravelDirection":
        if self is TravelDirection.UP:
            return TravelDirection.DOWN
        if self is TravelDirection.DOWN:
            return TravelDirection.UP
        return TravelDirection.STATIONARY


class InvalidFloorError(ValueError):
    """Raised when a floor identifier is not a positive integer."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"Invalid floor number for '{name}': {value!r}. Floor numbers must be positive integers."
        )


class CallStore(Protocol):
    """Interface consumed by the transport layer and the scenario runner."""

    def add_call(self, floor: int) -> None:
        ...

    def list_calls(self) -> List[int]:
        ...

    def remove_call(self, floor: int) -> bool:
        ...

    def __len__(self) -> int:
        ...

    def next_stop(
        self,
        current_floor: int,
        direction: TravelDirection = TravelDirection.STATIONARY,
    ) -> Optional[int]:
        """
        Return the floor the elevator should serve next, or None.

        Implementations must not mutate pending calls; callers remove a
        call once it has been served.
        """
        ...
