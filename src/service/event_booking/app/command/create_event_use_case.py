from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_booking.domain.entity.event_entity import Event


class CreateEventUseCase:
    def __init__(self, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @Logger.io
    async def create_event(
        self,
        *,
        title: str,
        description: str,
        overview: str,
        image: str,
        venue: str,
        location: str,
        date: str,
        time: str,
        mode: str,
        audience: str,
        agenda: List[str],
        organizer: str,
        tags: List[str],
    ) -> Event:
        event = Event.create(
            title=title,
            description=description,
            overview=overview,
            image=image,
            venue=venue,
            location=location,
            date=date,
            time=time,
            mode=mode,
            audience=audience,
            agenda=agenda,
            organizer=organizer,
            tags=tags,
        )
        return await self.event_command_repo.create(event=event)
