"""
Booking Command Repository Interface

Writes validate the email first, then check the event reference against
storage when the booking is new or its event_id changed.
"""

from abc import ABC, abstractmethod

from src.service.event_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Raises:
            ValidationError: email fails the format check
            MissingReferenceError: booking.event_id does not match any event
        """
        pass

    @abstractmethod
    async def update(self, *, booking: Booking) -> Booking:
        """
        Raises:
            NotFoundError: no booking with booking.id
            ValidationError: email fails the format check
            MissingReferenceError: the new event_id does not match any event
        """
        pass
