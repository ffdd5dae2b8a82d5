# Import all models so Base.metadata knows every table before create_all
from src.service.event_booking.driven_adapter.model.booking_model import BookingModel
from src.service.event_booking.driven_adapter.model.event_model import EventModel


__all__ = [
    'BookingModel',
    'EventModel',
]
