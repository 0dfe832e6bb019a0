"""Identifiers for enrollment and ticket records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """Identifier of an authenticated user."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("UserId must be a positive integer")


@dataclass(frozen=True)
class EnrollmentId:
    value: int


@dataclass(frozen=True)
class TicketId:
    value: int


@dataclass(frozen=True)
class TicketTypeId:
    value: int
