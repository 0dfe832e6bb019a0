"""Hotel service - eligibility checks and hotel reads.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from hotels.domain import Hotel, HotelId
from hotels.domain.errors import (
    EnrollmentNotFoundError,
    HotelNotFoundError,
    HotelsNotFoundError,
    TicketNotEligibleError,
    TicketNotFoundError,
)
from hotels.stores.interfaces import HotelStore
from tickets.domain import UserId
from tickets.stores.interfaces import EnrollmentStore, TicketStore

logger = logging.getLogger("hotels.service")


class HotelService:
    """Service for hotel listing and lookup."""

    def __init__(
        self,
        hotel_store: HotelStore,
        enrollment_store: EnrollmentStore,
        ticket_store: TicketStore,
    ) -> None:
        self._hotels = hotel_store
        self._enrollments = enrollment_store
        self._tickets = ticket_store

    def list_hotels(self, user_id: int) -> list[Hotel]:
        """Return all hotels if the user holds a paid, in-person ticket.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            TicketNotFoundError: If the enrollment has no ticket.
            TicketNotEligibleError: If the ticket is remote or only reserved.
            HotelsNotFoundError: If the hotel catalog could not be read.
        """
        enrollment = self._enrollments.find_enrollment_by_user(UserId(user_id))
        if enrollment is None:
            raise EnrollmentNotFoundError(user_id)

        ticket = self._tickets.find_ticket_by_enrollment(enrollment.id)
        if ticket is None:
            raise TicketNotFoundError(enrollment.id.value)

        ticket_type = self._tickets.find_ticket_type_by_ticket(ticket.id)
        if ticket_type.is_remote or ticket.is_reserved:
            logger.info(
                "Ticket %s not eligible for hotels (remote=%s, status=%s)",
                ticket.id.value,
                ticket_type.is_remote,
                ticket.status.value,
            )
            raise TicketNotEligibleError(ticket.id.value)

        hotels = self._hotels.find_all_hotels()
        if hotels is None:
            raise HotelsNotFoundError()

        return hotels

    def get_hotel(self, hotel_id: int) -> Hotel:
        """Return a hotel with its rooms.

        Raises:
            HotelNotFoundError: If the hotel does not exist.
        """
        hotel = self._hotels.find_hotel_by_id(HotelId(hotel_id))
        if hotel is None:
            raise HotelNotFoundError(hotel_id)
        return hotel
