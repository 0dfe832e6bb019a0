"""Store interfaces for enrollments and tickets.

Stores return domain models, or None when a record is absent.
"""

from abc import ABC, abstractmethod

from tickets.domain import Enrollment, EnrollmentId, Ticket, TicketId, TicketType, UserId


class EnrollmentStore(ABC):
    """Interface for enrollment lookups."""

    @abstractmethod
    def find_enrollment_by_user(self, user_id: UserId) -> Enrollment | None:
        """Return the user's enrollment with its address, or None."""
        ...


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    def find_ticket_by_enrollment(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """Return the first ticket of an enrollment, or None."""
        ...

    @abstractmethod
    def find_ticket_type_by_ticket(self, ticket_id: TicketId) -> TicketType:
        """Return the type of an existing ticket."""
        ...
