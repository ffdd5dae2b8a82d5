from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_booking.domain.entity.event_entity import Event
from src.service.event_booking.driven_adapter.model.event_model import EventModel


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        async with self.session_factory() as session:
            result = await session.execute(select(EventModel).where(EventModel.id == event_id))
            event_model = result.scalar_one_or_none()

            if not event_model:
                return None

            return self._model_to_entity(event_model)

    @Logger.io
    async def get_by_slug(self, *, slug: str) -> Optional[Event]:
        async with self.session_factory() as session:
            result = await session.execute(select(EventModel).where(EventModel.slug == slug))
            event_model = result.scalar_one_or_none()

            if not event_model:
                return None

            return self._model_to_entity(event_model)

    @Logger.io
    async def list_events(self) -> List[Event]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EventModel).order_by(EventModel.created_at.desc(), EventModel.id.desc())
            )
            return [self._model_to_entity(event_model) for event_model in result.scalars()]

    @Logger.io
    async def exists(self, *, event_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EventModel.id).where(EventModel.id == event_id).limit(1)
            )
            return result.scalar_one_or_none() is not None

    @staticmethod
    def _model_to_entity(event_model: EventModel) -> Event:
        return Event(
            id=event_model.id,
            title=event_model.title,
            slug=event_model.slug,
            description=event_model.description,
            overview=event_model.overview,
            image=event_model.image,
            venue=event_model.venue,
            location=event_model.location,
            date=event_model.date,
            time=event_model.time,
            mode=event_model.mode,
            audience=event_model.audience,
            agenda=list(event_model.agenda),
            organizer=event_model.organizer,
            tags=list(event_model.tags),
            created_at=event_model.created_at,
            updated_at=event_model.updated_at,
            persisted_title=event_model.title,
        )
