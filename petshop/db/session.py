"""Database engine and session handle."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from petshop import models  # noqa: F401
from petshop.core.config import Settings
from petshop.db.base import Base


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:  # type: ignore[no-untyped-def]
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the async engine and hands out sessions.

    One instance is built by the application factory and stored on
    ``app.state``; request handlers receive sessions through
    :func:`petshop.api.deps.get_db_session`.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, future=True)
        if self.engine.dialect.name == "sqlite":
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys
            )
        self.sessionmaker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine, expire_on_commit=False, class_=AsyncSession
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a handle for the configured database URL."""
        return cls(settings.database_url, echo=settings.database_echo)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session bound to this database."""
        async with self.sessionmaker() as session:
            yield session

    async def create_all(self) -> None:
        """Create every mapped table (tests and local development)."""
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        """Release pooled connections."""
        await self.engine.dispose()
