from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_event_command_repo import IEventCommandRepo


class DeleteEventUseCase:
    """Bookings pointing at the deleted event are kept as they are."""

    def __init__(self, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @Logger.io
    async def delete_event(self, *, event_id: int) -> None:
        if not await self.event_command_repo.delete(event_id=event_id):
            raise NotFoundError(f'Event {event_id} not found')
        Logger.base.info(f'🗑️ [EVENT] Deleted event {event_id}')
