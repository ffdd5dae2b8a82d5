from typing import Any

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_booking.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_booking.domain.entity.event_entity import Event


class UpdateEventUseCase:
    def __init__(
        self, event_command_repo: IEventCommandRepo, event_query_repo: IEventQueryRepo
    ) -> None:
        self.event_command_repo = event_command_repo
        self.event_query_repo = event_query_repo

    @Logger.io
    async def update_event(self, *, event_id: int, **changes: Any) -> Event:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError(f'Event {event_id} not found')

        updated = await self.event_command_repo.update(event=event.apply_changes(**changes))
        Logger.base.info(f'📝 [EVENT] Updated event {event_id} ({", ".join(sorted(changes))})')
        return updated
