"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Hotel, HotelId


class HotelStore(ABC):
    """Interface for hotel read operations."""

    @abstractmethod
    def find_all_hotels(self) -> list[Hotel] | None:
        """Return all hotels ordered by id, without rooms, or None if unavailable."""
        ...

    @abstractmethod
    def find_hotel_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel with its rooms, or None if not found."""
        ...
