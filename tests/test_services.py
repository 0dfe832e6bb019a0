"""Unit tests for HotelService.

These test the eligibility rule and domain error mapping against
in-memory stores.
Run with: pytest tests/test_services.py -v
"""

from datetime import datetime, timezone

import pytest

from hotels.domain import Capacity, Hotel, HotelId, Room, RoomId
from hotels.domain.errors import (
    EnrollmentNotFoundError,
    HotelNotFoundError,
    HotelsNotFoundError,
    TicketNotEligibleError,
    TicketNotFoundError,
)
from hotels.services import HotelService
from hotels.stores.interfaces import HotelStore
from tests.fakes import (
    InMemoryEnrollmentStore,
    InMemoryHotelStore,
    InMemoryTicketStore,
    UnavailableHotelStore,
)
from tickets.domain import (
    Enrollment,
    EnrollmentId,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    UserId,
)

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
USER_ID = 10


def make_enrollment(user_id: int = USER_ID) -> Enrollment:
    return Enrollment(
        id=EnrollmentId(1),
        user_id=UserId(user_id),
        name="Ada",
        address=None,
        created_at=NOW,
        updated_at=NOW,
    )


def make_ticket(status: TicketStatus = TicketStatus.PAID) -> Ticket:
    return Ticket(
        id=TicketId(5),
        enrollment_id=EnrollmentId(1),
        ticket_type_id=TicketTypeId(2),
        status=status,
        created_at=NOW,
        updated_at=NOW,
    )


def make_ticket_type(is_remote: bool = False) -> TicketType:
    return TicketType(
        id=TicketTypeId(2),
        name="Presencial + Hotel",
        price=60000,
        is_remote=is_remote,
        includes_hotel=True,
    )


def make_hotel(hotel_id: int, room_count: int = 0) -> Hotel:
    rooms = tuple(
        Room(
            id=RoomId(hotel_id * 100 + n),
            hotel_id=HotelId(hotel_id),
            name=f"Room {n}",
            capacity=Capacity(2),
            created_at=NOW,
            updated_at=NOW,
        )
        for n in range(room_count)
    )
    return Hotel(
        id=HotelId(hotel_id),
        name=f"Hotel {hotel_id}",
        image=f"https://images.example.com/{hotel_id}.jpg",
        created_at=NOW,
        updated_at=NOW,
        rooms=rooms,
    )


def build_service(
    *,
    enrollment: Enrollment | None = None,
    ticket: Ticket | None = None,
    ticket_type: TicketType | None = None,
    hotels: list[Hotel] | None = None,
    hotel_store: HotelStore | None = None,
) -> HotelService:
    return HotelService(
        hotel_store=hotel_store or InMemoryHotelStore(hotels),
        enrollment_store=InMemoryEnrollmentStore([enrollment] if enrollment else []),
        ticket_store=InMemoryTicketStore(
            [ticket] if ticket else [],
            [ticket_type] if ticket_type else [],
        ),
    )


class TestListHotels:
    """Tests for HotelService.list_hotels."""

    def test_no_enrollment_raises_not_found(self):
        service = build_service(hotels=[make_hotel(1)])

        with pytest.raises(EnrollmentNotFoundError):
            service.list_hotels(USER_ID)

    def test_no_ticket_raises_not_found(self):
        service = build_service(enrollment=make_enrollment(), hotels=[make_hotel(1)])

        with pytest.raises(TicketNotFoundError):
            service.list_hotels(USER_ID)

    @pytest.mark.parametrize("status", [TicketStatus.PAID, TicketStatus.RESERVED])
    def test_remote_ticket_raises_conflict_regardless_of_status(self, status):
        service = build_service(
            enrollment=make_enrollment(),
            ticket=make_ticket(status),
            ticket_type=make_ticket_type(is_remote=True),
            hotels=[make_hotel(1)],
        )

        with pytest.raises(TicketNotEligibleError):
            service.list_hotels(USER_ID)

    def test_reserved_ticket_raises_conflict(self):
        service = build_service(
            enrollment=make_enrollment(),
            ticket=make_ticket(TicketStatus.RESERVED),
            ticket_type=make_ticket_type(),
            hotels=[make_hotel(1)],
        )

        with pytest.raises(TicketNotEligibleError):
            service.list_hotels(USER_ID)

    def test_empty_catalog_returns_empty_list(self):
        service = build_service(
            enrollment=make_enrollment(),
            ticket=make_ticket(),
            ticket_type=make_ticket_type(),
            hotels=[],
        )

        assert service.list_hotels(USER_ID) == []

    def test_unavailable_catalog_raises_not_found(self):
        service = build_service(
            enrollment=make_enrollment(),
            ticket=make_ticket(),
            ticket_type=make_ticket_type(),
            hotel_store=UnavailableHotelStore(),
        )

        with pytest.raises(HotelsNotFoundError):
            service.list_hotels(USER_ID)

    def test_paid_ticket_returns_all_hotels_without_rooms(self):
        hotels = [make_hotel(1, room_count=2), make_hotel(2)]
        service = build_service(
            enrollment=make_enrollment(),
            ticket=make_ticket(),
            ticket_type=make_ticket_type(),
            hotels=hotels,
        )

        result = service.list_hotels(USER_ID)

        assert [h.id for h in result] == [HotelId(1), HotelId(2)]
        assert all(h.rooms == () for h in result)

    def test_repeated_calls_return_identical_results(self):
        service = build_service(
            enrollment=make_enrollment(),
            ticket=make_ticket(),
            ticket_type=make_ticket_type(),
            hotels=[make_hotel(1), make_hotel(2)],
        )

        assert service.list_hotels(USER_ID) == service.list_hotels(USER_ID)


class TestGetHotel:
    """Tests for HotelService.get_hotel."""

    def test_unknown_hotel_raises_not_found(self):
        service = build_service(hotels=[make_hotel(1)])

        with pytest.raises(HotelNotFoundError) as exc_info:
            service.get_hotel(0)

        assert exc_info.value.hotel_id == 0

    @pytest.mark.parametrize("room_count", [0, 1, 3])
    def test_returns_hotel_with_its_rooms(self, room_count):
        service = build_service(hotels=[make_hotel(1), make_hotel(2, room_count)])

        hotel = service.get_hotel(2)

        assert hotel.id == HotelId(2)
        assert len(hotel.rooms) == room_count
        assert all(room.hotel_id == HotelId(2) for room in hotel.rooms)

    def test_does_not_require_a_ticket(self):
        service = build_service(hotels=[make_hotel(1)])

        assert service.get_hotel(1).name == "Hotel 1"
