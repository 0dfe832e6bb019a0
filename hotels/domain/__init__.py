from hotels.domain.models import Hotel, Room
from hotels.domain.value_objects import Capacity, HotelId, RoomId

__all__ = [
    "Hotel",
    "Room",
    "HotelId",
    "RoomId",
    "Capacity",
]
