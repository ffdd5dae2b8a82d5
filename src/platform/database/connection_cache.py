"""
Process-wide database connection cache

One DatabaseHandle (async engine + session maker) is shared by every repository
in the process. The cache moves through three states:

- UNINITIALIZED: nothing cached
- CONNECTING: one in-flight connection task, shared by every concurrent caller
- CONNECTED: the handle is cached and returned directly

A failed connection attempt clears the in-flight task so the next acquire()
starts over. The module-level `connection_cache` survives importlib.reload()
of this module, so code reloaders keep the live connection.
"""

import asyncio
from contextlib import asynccontextmanager
from enum import StrEnum
from typing import AsyncGenerator, Awaitable, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import create_db_and_tables, create_engine_for, ping
from src.platform.exception.exceptions import ConfigurationError
from src.platform.logging.loguru_io import Logger


class ConnectionState(StrEnum):
    UNINITIALIZED = 'uninitialized'
    CONNECTING = 'connecting'
    CONNECTED = 'connected'


class DatabaseHandle:
    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Rolls back on exception and closes the session on exit"""
        async with self.session_maker() as session:
            yield session

    async def dispose(self) -> None:
        await self.engine.dispose()


Connector = Callable[[str], Awaitable[DatabaseHandle]]


@Logger.io
async def connect_database(uri: str) -> DatabaseHandle:
    engine = create_engine_for(uri)
    try:
        await ping(engine)
        if settings.DB_CREATE_SCHEMA:
            # Registers every table on Base.metadata
            import src.service.event_booking.driven_adapter.model  # noqa: F401

            await create_db_and_tables(engine)
    except Exception:
        await engine.dispose()
        raise
    return DatabaseHandle(engine)


class DatabaseConnectionCache:
    def __init__(self, *, uri: Optional[str] = None, connector: Optional[Connector] = None) -> None:
        self._uri = uri
        self._connector: Connector = connector or connect_database
        self._handle: Optional[DatabaseHandle] = None
        self._pending: Optional[asyncio.Future[DatabaseHandle]] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def state(self) -> ConnectionState:
        if self._handle is not None:
            return ConnectionState.CONNECTED
        if self._pending is not None:
            return ConnectionState.CONNECTING
        return ConnectionState.UNINITIALIZED

    def _resolve_uri(self) -> str:
        if self._uri:
            return self._uri
        if settings.DATABASE_URI is None:
            raise ConfigurationError(
                'Please define the DATABASE_URI environment variable in your environment.'
            )
        return settings.DATABASE_URI.get_secret_value()

    def _drop_if_loop_changed(self) -> None:
        current_loop = asyncio.get_running_loop()
        if self._loop is not None and self._loop is not current_loop:
            if self._handle is not None or self._pending is not None:
                # The old engine is bound to a dead loop and cannot be awaited from here
                Logger.base.warning('🔄 [DB] Event loop changed, dropping cached connection')
                self._handle = None
                self._pending = None
        self._loop = current_loop

    async def acquire(self) -> DatabaseHandle:
        uri = self._resolve_uri()
        self._drop_if_loop_changed()

        if self._handle is not None:
            return self._handle

        if self._pending is None:
            Logger.base.info('🔗 [DB] Opening database connection')
            self._pending = asyncio.ensure_future(self._connector(uri))

        pending = self._pending
        try:
            # shield: one cancelled caller must not cancel the attempt the others wait on
            handle = await asyncio.shield(pending)
        except Exception as e:
            if self._pending is pending:
                self._pending = None
                Logger.base.warning(f'⚠️ [DB] Connection attempt failed, cache reset: {e}')
            raise

        if self._handle is None:
            self._handle = handle
            Logger.base.info('✅ [DB] Database connection ready')
        if self._pending is pending:
            self._pending = None
        return self._handle

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        handle = await self.acquire()
        async with handle.session() as session:
            yield session

    async def close(self) -> None:
        handle = self._handle
        self._handle = None
        self._pending = None
        self._loop = None
        if handle is not None:
            await handle.dispose()
            Logger.base.info('🔌 [DB] Database connection closed')


# importlib.reload() re-executes this module in its existing namespace
connection_cache: DatabaseConnectionCache = (
    globals().get('connection_cache') or DatabaseConnectionCache()
)


async def acquire() -> DatabaseHandle:
    """Return the process-wide database handle, connecting on first use"""
    return await connection_cache.acquire()
