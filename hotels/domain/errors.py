"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    HOTELS_NOT_FOUND = "HOTELS_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    TICKET_NOT_ELIGIBLE = "TICKET_NOT_ELIGIBLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """A referenced record does not exist."""


class ConflictError(DomainError):
    """The request conflicts with the caller's current state."""


class EnrollmentNotFoundError(NotFoundError):
    """Raised when the user has no enrollment."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.ENROLLMENT_NOT_FOUND,
            message="Enrollment not found",
        )
        self.user_id = user_id


class TicketNotFoundError(NotFoundError):
    """Raised when an enrollment has no ticket."""

    def __init__(self, enrollment_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.enrollment_id = enrollment_id


class HotelsNotFoundError(NotFoundError):
    """Raised when the hotel catalog lookup yields no result."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.HOTELS_NOT_FOUND,
            message="Hotel catalog unavailable",
        )


class HotelNotFoundError(NotFoundError):
    """Raised when a hotel is not found."""

    def __init__(self, hotel_id: int) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found",
        )
        self.hotel_id = hotel_id


class TicketNotEligibleError(ConflictError):
    """Raised when the ticket is remote or not paid yet."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_ELIGIBLE,
            message="You don't have authorization",
        )
        self.ticket_id = ticket_id
