from src.platform.logging.loguru_io import Logger
from src.service.event_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.event_booking.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    def __init__(self, booking_command_repo: IBookingCommandRepo) -> None:
        self.booking_command_repo = booking_command_repo

    @Logger.io
    async def create_booking(self, *, event_id: int, email: str) -> Booking:
        booking = Booking.create(event_id=event_id, email=email)
        return await self.booking_command_repo.create(booking=booking)
