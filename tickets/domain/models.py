"""Domain models for enrollments and tickets.

Django ORM models are in tickets/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from tickets.domain.value_objects import EnrollmentId, TicketId, TicketTypeId, UserId


class TicketStatus(Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Address:
    cep: str
    street: str
    city: str
    state: str
    number: str
    neighborhood: str
    address_detail: str | None


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of an Enrollment."""

    id: EnrollmentId
    user_id: UserId
    name: str
    address: Address | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    enrollment_id: EnrollmentId
    ticket_type_id: TicketTypeId
    status: TicketStatus
    created_at: datetime
    updated_at: datetime

    @property
    def is_reserved(self) -> bool:
        return self.status is TicketStatus.RESERVED
