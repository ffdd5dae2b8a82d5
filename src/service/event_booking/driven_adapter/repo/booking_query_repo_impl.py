from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.event_booking.domain.entity.booking_entity import Booking
from src.service.event_booking.driven_adapter.model.booking_model import BookingModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.id == booking_id)
            )
            booking_model = result.scalar_one_or_none()

            if not booking_model:
                return None

            return self._model_to_entity(booking_model)

    @Logger.io
    async def list_by_event(self, *, event_id: int) -> List[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.event_id == event_id)
                .order_by(BookingModel.id)
            )
            return [self._model_to_entity(booking_model) for booking_model in result.scalars()]

    @Logger.io
    async def count_by_event(self, *, event_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.count(BookingModel.id)).where(BookingModel.event_id == event_id)
            )
            return result.scalar_one()

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
