"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ledger.core.config import Settings

from .base import Base

logger = logging.getLogger(__name__)

# Execution option marking connections that run write units.
IMMEDIATE_OPTION = "ledger_begin_immediate"


def _install_sqlite_hooks(engine: AsyncEngine, busy_timeout_ms: int) -> None:
    """Take over BEGIN from the sqlite3 driver so write units can lock up front.

    Write sessions start with ``BEGIN IMMEDIATE``: the reserved lock is held
    from the first read, so a balance check and the debit that follows cannot
    interleave with another writer. Readers keep deferred transactions and in
    WAL mode are never blocked by a writer.
    """
    sync_engine = engine.sync_engine

    @event.listens_for(sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")
        cursor.close()

    @event.listens_for(sync_engine, "begin")
    def _on_begin(conn: Any) -> None:
        if conn.get_execution_options().get(IMMEDIATE_OPTION):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")


class Database:
    """Storage context: one engine plus the session factories built on it.

    ``sessions`` hands out sessions for queries, ``write_sessions`` for atomic
    units that mutate balances. The instance is created once per application
    and passed explicitly to whatever needs storage.
    """

    def __init__(self, url: str, *, echo: bool = False, busy_timeout_ms: int = 5000) -> None:
        self.url = make_url(url)
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, future=True)
        if self.is_sqlite:
            _install_sqlite_hooks(self.engine, busy_timeout_ms)

        self.sessions: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.write_sessions: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine.execution_options(**{IMMEDIATE_OPTION: True}),
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            echo=settings.database.echo or settings.debug,
            busy_timeout_ms=settings.database.busy_timeout_ms,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.url.get_backend_name() == "sqlite"

    def ensure_storage_dir(self) -> None:
        database = self.url.database
        if not self.is_sqlite or not database or database == ":memory:" or database.startswith("file:"):
            return
        Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Query session that commits on success and rolls back on error."""
        async with self.sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def init_db(self) -> None:
        """Create database tables on first run (migrations preferred in production)."""
        from ledger.db import models  # noqa: F401

        self.ensure_storage_dir()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database ready at %s", self.url.render_as_string(hide_password=True))

    async def dispose(self) -> None:
        await self.engine.dispose()


__all__ = ["Database", "IMMEDIATE_OPTION"]
