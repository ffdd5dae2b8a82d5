from typing import Optional

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.event_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.event_booking.domain.entity.booking_entity import Booking


class UpdateBookingUseCase:
    def __init__(
        self, booking_command_repo: IBookingCommandRepo, booking_query_repo: IBookingQueryRepo
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo

    @Logger.io
    async def update_booking(
        self, *, booking_id: int, event_id: Optional[int] = None, email: Optional[str] = None
    ) -> Booking:
        booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)
        if booking is None:
            raise NotFoundError(f'Booking {booking_id} not found')

        return await self.booking_command_repo.update(
            booking=booking.change(event_id=event_id, email=email)
        )
