from pathlib import Path

import pytest
from sqlalchemy import inspect, text

from src.platform.database.connection_cache import ConnectionState, DatabaseConnectionCache


@pytest.mark.integration
class TestConnectionCacheWithSqlite:
    @pytest.mark.asyncio
    async def test_acquire_connects_and_creates_schema(
        self, connection_cache: DatabaseConnectionCache
    ) -> None:
        handle = await connection_cache.acquire()

        async with handle.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
            event_indexes = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_indexes('event')
            )
            booking_indexes = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_indexes('booking')
            )

        assert {'event', 'booking'} <= set(tables)
        assert any(
            index['column_names'] == ['slug'] and index['unique'] for index in event_indexes
        )
        assert any(index['column_names'] == ['event_id'] for index in booking_indexes)

    @pytest.mark.asyncio
    async def test_session_runs_statements_on_cached_handle(
        self, connection_cache: DatabaseConnectionCache
    ) -> None:
        async with connection_cache.session() as session:
            result = await session.execute(text('SELECT 1'))
            assert result.scalar_one() == 1

        first = await connection_cache.acquire()
        async with connection_cache.session():
            pass
        assert await connection_cache.acquire() is first

    @pytest.mark.asyncio
    async def test_unreachable_database_propagates_and_allows_retry(self, tmp_path: Path) -> None:
        missing_dir = tmp_path / 'missing'
        cache = DatabaseConnectionCache(uri=f'sqlite+aiosqlite:///{missing_dir / "db.sqlite"}')

        with pytest.raises(Exception):
            await cache.acquire()
        assert cache.state == ConnectionState.UNINITIALIZED

        missing_dir.mkdir()
        await cache.acquire()
        assert cache.state == ConnectionState.CONNECTED
        await cache.close()
