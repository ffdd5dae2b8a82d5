"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.connection_cache import connection_cache
from src.service.event_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.event_booking.app.command.create_event_use_case import CreateEventUseCase
from src.service.event_booking.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.event_booking.app.command.update_booking_use_case import UpdateBookingUseCase
from src.service.event_booking.app.command.update_event_use_case import UpdateEventUseCase
from src.service.event_booking.app.query.get_event_use_case import GetEventUseCase
from src.service.event_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.event_booking.app.query.list_events_use_case import ListEventsUseCase
from src.service.event_booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.event_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.event_booking.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from src.service.event_booking.driven_adapter.repo.event_query_repo_impl import (
    EventQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Process-wide connection cache (shared with code that imports it directly)
    database = providers.Object(connection_cache)

    # Repositories (stateless - open a session per call)
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )

    # Event use cases
    create_event_use_case = providers.Factory(
        CreateEventUseCase, event_command_repo=event_command_repo
    )
    update_event_use_case = providers.Factory(
        UpdateEventUseCase,
        event_command_repo=event_command_repo,
        event_query_repo=event_query_repo,
    )
    delete_event_use_case = providers.Factory(
        DeleteEventUseCase, event_command_repo=event_command_repo
    )
    get_event_use_case = providers.Factory(GetEventUseCase, event_query_repo=event_query_repo)
    list_events_use_case = providers.Factory(ListEventsUseCase, event_query_repo=event_query_repo)

    # Booking use cases
    create_booking_use_case = providers.Factory(
        CreateBookingUseCase, booking_command_repo=booking_command_repo
    )
    update_booking_use_case = providers.Factory(
        UpdateBookingUseCase,
        booking_command_repo=booking_command_repo,
        booking_query_repo=booking_query_repo,
    )
    list_bookings_use_case = providers.Factory(
        ListBookingsUseCase, booking_query_repo=booking_query_repo
    )


container = Container()


def setup() -> None:
    container.config_service()


async def cleanup() -> None:
    await container.database().close()
    container.reset_singletons()
