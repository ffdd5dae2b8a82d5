from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.event_booking.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_by_event(self, *, event_id: int) -> List[Booking]:
        pass

    @abstractmethod
    async def count_by_event(self, *, event_id: int) -> int:
        pass
