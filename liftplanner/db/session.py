"""Async engine/session lifecycle.

A ``Database`` is built by the application lifespan, stored on ``app.state``
and handed to request handlers through ``get_db``. Nothing here is a module
level singleton, so tests and workers can run several apps side by side.
"""
import logging
import time
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from liftplanner.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany) -> None:
    conn.info["query_start"] = time.perf_counter()


def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany) -> None:
    started = conn.info.pop("query_start", time.perf_counter())
    logger.debug(
        "Executed query in %.1f ms (rows=%s): %s",
        (time.perf_counter() - started) * 1000,
        cursor.rowcount,
        statement,
    )


class Database:
    """Owns the connection pool and the session factory."""

    def __init__(self, settings: Settings):
        self.url = settings.database_url
        self._settings = settings
        self.engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def connect(self) -> None:
        if self.engine is not None:
            return
        kwargs = {"echo": self._settings.db_echo, "pool_pre_ping": True}
        if not self.is_sqlite:
            kwargs.update(
                pool_size=self._settings.db_pool_size,
                max_overflow=self._settings.db_max_overflow,
                pool_timeout=self._settings.db_pool_timeout,
            )
        self.engine = create_async_engine(self.url, **kwargs)
        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        event.listen(self.engine.sync_engine, "before_cursor_execute", _before_cursor_execute)
        event.listen(self.engine.sync_engine, "after_cursor_execute", _after_cursor_execute)
        self._sessionmaker = async_sessionmaker(
            self.engine,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Database engine created (%s)", self.engine.url.render_as_string(hide_password=True))

    async def create_all(self) -> None:
        # import models so they register on Base.metadata
        import liftplanner.db.base  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    def session(self) -> AsyncSession:
        if self._sessionmaker is None:
            raise RuntimeError("Database.connect() has not been called")
        return self._sessionmaker()

    async def dispose(self) -> None:
        """Close pooled connections; checked-out ones close when returned."""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._sessionmaker = None
        logger.info("Database engine disposed")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database = request.app.state.db
    async with database.session() as session:
        yield session
