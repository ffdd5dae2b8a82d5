"""
Event Command Repository Interface

Every write runs Event.validate_and_normalize() before touching storage.
"""

from abc import ABC, abstractmethod

from src.service.event_booking.domain.entity.event_entity import Event


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event: Event) -> Event:
        """
        Validate, normalize and insert a new event

        Raises:
            ValidationError: a field is missing or malformed
            UniquenessError: another event already uses the generated slug
        """
        pass

    @abstractmethod
    async def update(self, *, event: Event) -> Event:
        """
        Validate, normalize and overwrite an existing event

        The slug is regenerated only when the title differs from the stored one.

        Raises:
            NotFoundError: no event with event.id
            ValidationError: a field is missing or malformed
            UniquenessError: the new slug collides with another event
        """
        pass

    @abstractmethod
    async def delete(self, *, event_id: int) -> bool:
        """Delete an event; bookings that reference it are left untouched"""
        pass
