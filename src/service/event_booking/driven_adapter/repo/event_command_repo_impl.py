from typing import Any, AsyncContextManager, Callable

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError, UniquenessError
from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_booking.domain.entity.event_entity import Event
from src.service.event_booking.driven_adapter.model.event_model import EventModel


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, event: Event) -> Event:
        event.validate_and_normalize()
        async with self.session_factory() as session:
            event_model = EventModel(**self._entity_to_columns(event))
            session.add(event_model)
            await self._commit(session, slug=event.slug)
            await session.refresh(event_model)

            Logger.base.info(f'✅ [EVENT] Created event {event_model.id} ({event_model.slug})')
            return self._model_to_entity(event_model)

    @Logger.io
    async def update(self, *, event: Event) -> Event:
        if event.id is None:
            raise NotFoundError('Event has not been created yet')

        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event.id)
            if event_model is None:
                raise NotFoundError(f'Event {event.id} not found')

            event.persisted_title = event_model.title
            event.slug = event.slug or event_model.slug
            event.validate_and_normalize()

            for column, value in self._entity_to_columns(event).items():
                setattr(event_model, column, value)
            await self._commit(session, slug=event.slug)
            await session.refresh(event_model)

            return self._model_to_entity(event_model)

    @Logger.io
    async def delete(self, *, event_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(delete(EventModel).where(EventModel.id == event_id))
            await session.commit()
            return result.rowcount > 0

    async def _commit(self, session: AsyncSession, *, slug: str) -> None:
        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            raise UniquenessError(f'An event with slug "{slug}" already exists.') from e

    @staticmethod
    def _entity_to_columns(event: Event) -> dict[str, Any]:
        return {
            'title': event.title,
            'slug': event.slug,
            'description': event.description,
            'overview': event.overview,
            'image': event.image,
            'venue': event.venue,
            'location': event.location,
            'date': event.date,
            'time': event.time,
            'mode': event.mode,
            'audience': event.audience,
            'agenda': list(event.agenda),
            'organizer': event.organizer,
            'tags': list(event.tags),
        }

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
