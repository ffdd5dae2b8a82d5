from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.event_booking.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @Logger.io
    async def list_by_event(self, *, event_id: int) -> List[Booking]:
        bookings = await self.booking_query_repo.list_by_event(event_id=event_id)
        Logger.base.info(f'📋 [BOOKING] {len(bookings)} booking(s) for event {event_id}')
        return bookings
