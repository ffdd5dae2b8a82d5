from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_booking.domain.entity.event_entity import Event


class ListEventsUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @Logger.io
    async def list_events(self) -> List[Event]:
        """Newest first"""
        return await self.event_query_repo.list_events()
