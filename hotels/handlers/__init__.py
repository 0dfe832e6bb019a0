from hotels.handlers.views import HotelDetailView, HotelListView

__all__ = ["HotelListView", "HotelDetailView"]
