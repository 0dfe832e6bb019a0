"""Django ORM implementation of the HotelStore."""

from hotels import models
from hotels.domain import Capacity, Hotel, HotelId, Room, RoomId
from hotels.stores.interfaces import HotelStore


class DjangoHotelStore(HotelStore):
    """Relational hotel store using the Django ORM."""

    def find_all_hotels(self) -> list[Hotel]:
        return [_to_hotel(row) for row in models.Hotel.objects.all()]

    def find_hotel_by_id(self, hotel_id: HotelId) -> Hotel | None:
        row = (
            models.Hotel.objects.prefetch_related("rooms")
            .filter(pk=hotel_id.value)
            .first()
        )
        if row is None:
            return None
        rooms = tuple(_to_room(room) for room in row.rooms.all())
        return _to_hotel(row, rooms)


def _to_hotel(row: models.Hotel, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        id=HotelId(row.id),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


def _to_room(row: models.Room) -> Room:
    return Room(
        id=RoomId(row.id),
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
