from tickets.domain.models import Address, Enrollment, Ticket, TicketStatus, TicketType
from tickets.domain.value_objects import EnrollmentId, TicketId, TicketTypeId, UserId

__all__ = [
    "Address",
    "Enrollment",
    "Ticket",
    "TicketStatus",
    "TicketType",
    "UserId",
    "EnrollmentId",
    "TicketId",
    "TicketTypeId",
]
