"""
SQLAlchemy declarative base, engine construction and schema creation

Engines are built from the configured connection URI. Pool tuning from settings
only applies to server databases; SQLite drivers manage their own pool.
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def is_sqlite_uri(uri: str) -> bool:
    return uri.startswith('sqlite')


def build_engine_kwargs(uri: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = {'echo': settings.DB_ECHO, 'future': True}
    if not is_sqlite_uri(uri):
        kwargs |= {
            'pool_size': settings.DB_POOL_SIZE,
            'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
            'pool_timeout': settings.DB_POOL_TIMEOUT,
            'pool_recycle': settings.DB_POOL_RECYCLE,
            'pool_pre_ping': settings.DB_POOL_PRE_PING,
        }
    return kwargs


def create_engine_for(uri: str) -> AsyncEngine:
    return create_async_engine(uri, **build_engine_kwargs(uri))


async def ping(engine: AsyncEngine) -> None:
    """Round-trip one statement so connection problems surface at acquire time"""
    async with engine.connect() as conn:
        await conn.execute(text('SELECT 1'))


async def create_db_and_tables(engine: AsyncEngine) -> None:
    """Create tables and indexes for every imported model if they don't exist"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except Exception as e:
        error_msg = str(e).lower()
        if any(keyword in error_msg for keyword in ['already exists', 'duplicate key']):
            Logger.base.info('Tables already exist, skipping creation')
        else:
            Logger.base.error(f'Error creating tables: {e}')
            raise
