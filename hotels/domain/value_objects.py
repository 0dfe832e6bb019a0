"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HotelId:
    """Unique identifier for a Hotel."""

    value: int


@dataclass(frozen=True)
class RoomId:
    """Unique identifier for a Room."""

    value: int


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
