"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in hotels/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from hotels.domain.value_objects import Capacity, HotelId, RoomId


@dataclass(frozen=True)
class Room:
    """Domain representation of a Room."""

    id: RoomId
    hotel_id: HotelId
    name: str
    capacity: Capacity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel.

    `rooms` is only populated when the hotel is fetched on its own.
    """

    id: HotelId
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
    rooms: tuple[Room, ...] = ()
