from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.event_booking.domain.entity.event_entity import Event


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        pass

    @abstractmethod
    async def get_by_slug(self, *, slug: str) -> Optional[Event]:
        pass

    @abstractmethod
    async def list_events(self) -> List[Event]:
        pass

    @abstractmethod
    async def exists(self, *, event_id: int) -> bool:
        pass
