from hotels.stores.django_store import DjangoHotelStore
from hotels.stores.interfaces import HotelStore

__all__ = ["HotelStore", "DjangoHotelStore"]
