"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module is imported
- A throwaway SQLite database per test (sqlite+aiosqlite file under tmp_path)
- Connection cache and repository fixtures bound to that database

Architecture:
- Unit tests (test/**/unit/): pure logic, connectors and repos are mocked
- Integration tests (test/**/integration/): real engine, real tables
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['DB_CREATE_SCHEMA'] = 'true'
    # Tests always hand the URI to the cache explicitly
    os.environ.pop('DATABASE_URI', None)


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.platform.database.connection_cache import DatabaseConnectionCache  # noqa: E402
from src.service.event_booking.driven_adapter.repo.booking_command_repo_impl import (  # noqa: E402
    BookingCommandRepoImpl,
)
from src.service.event_booking.driven_adapter.repo.booking_query_repo_impl import (  # noqa: E402
    BookingQueryRepoImpl,
)
from src.service.event_booking.driven_adapter.repo.event_command_repo_impl import (  # noqa: E402
    EventCommandRepoImpl,
)
from src.service.event_booking.driven_adapter.repo.event_query_repo_impl import (  # noqa: E402
    EventQueryRepoImpl,
)
from test.event_test_constants import build_event_payload  # noqa: E402


@pytest.fixture
def sqlite_uri(tmp_path: Path) -> str:
    return f'sqlite+aiosqlite:///{tmp_path / "event_booking_test.db"}'


@pytest_asyncio.fixture
async def connection_cache(sqlite_uri: str) -> AsyncGenerator[DatabaseConnectionCache, None]:
    cache = DatabaseConnectionCache(uri=sqlite_uri)
    yield cache
    await cache.close()


@pytest.fixture
def event_command_repo(connection_cache: DatabaseConnectionCache) -> EventCommandRepoImpl:
    return EventCommandRepoImpl(session_factory=connection_cache.session)


@pytest.fixture
def event_query_repo(connection_cache: DatabaseConnectionCache) -> EventQueryRepoImpl:
    return EventQueryRepoImpl(session_factory=connection_cache.session)


@pytest.fixture
def booking_command_repo(connection_cache: DatabaseConnectionCache) -> BookingCommandRepoImpl:
    return BookingCommandRepoImpl(session_factory=connection_cache.session)


@pytest.fixture
def booking_query_repo(connection_cache: DatabaseConnectionCache) -> BookingQueryRepoImpl:
    return BookingQueryRepoImpl(session_factory=connection_cache.session)


@pytest.fixture
def event_payload() -> Callable[..., dict[str, Any]]:
    """Factory for valid event fields; keyword overrides replace single fields"""
    return build_event_payload
