from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_booking.domain.entity.event_entity import Event


class GetEventUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            Logger.base.warning(f'⚠️ [GET_EVENT] Event {event_id} not found')
        return event

    @Logger.io
    async def get_by_slug(self, *, slug: str) -> Optional[Event]:
        event = await self.event_query_repo.get_by_slug(slug=slug)
        if event is None:
            Logger.base.warning(f'⚠️ [GET_EVENT] Event "{slug}" not found')
        return event
