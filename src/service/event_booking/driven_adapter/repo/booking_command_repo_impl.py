from typing import AsyncContextManager, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import MissingReferenceError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.event_booking.domain.entity.booking_entity import Booking
from src.service.event_booking.driven_adapter.model.booking_model import BookingModel
from src.service.event_booking.driven_adapter.model.event_model import EventModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        booking.validate_and_normalize()
        async with self.session_factory() as session:
            await self._ensure_event_exists(session, event_id=booking.event_id)

            booking_model = BookingModel(event_id=booking.event_id, email=booking.email)
            session.add(booking_model)
            await session.commit()
            await session.refresh(booking_model)

            Logger.base.info(
                f'✅ [BOOKING] Created booking {booking_model.id} for event {booking_model.event_id}'
            )
            return self._model_to_entity(booking_model)

    @Logger.io
    async def update(self, *, booking: Booking) -> Booking:
        if booking.id is None:
            raise NotFoundError('Booking has not been created yet')

        booking.validate_and_normalize()
        async with self.session_factory() as session:
            booking_model = await session.get(BookingModel, booking.id)
            if booking_model is None:
                raise NotFoundError(f'Booking {booking.id} not found')

            booking.persisted_event_id = booking_model.event_id
            if booking.needs_reference_check:
                await self._ensure_event_exists(session, event_id=booking.event_id)

            booking_model.event_id = booking.event_id
            booking_model.email = booking.email
            await session.commit()
            await session.refresh(booking_model)

            return self._model_to_entity(booking_model)

    async def _ensure_event_exists(self, session: AsyncSession, *, event_id: int) -> None:
        result = await session.execute(
            select(EventModel.id).where(EventModel.id == event_id).limit(1)
        )
        if result.scalar_one_or_none() is None:
            Logger.base.warning(f'⚠️ [BOOKING] Event {event_id} does not exist')
            raise MissingReferenceError('Cannot create booking: referenced event does not exist.')

    @staticmethod
    def _model_to_entity(booking_model: BookingModel) -> Booking:
        return Booking(
            id=booking_model.id,
            event_id=booking_model.event_id,
            email=booking_model.email,
            created_at=booking_model.created_at,
            updated_at=booking_model.updated_at,
            persisted_event_id=booking_model.event_id,
        )
