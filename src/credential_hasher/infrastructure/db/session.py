"""Async SQLAlchemy engine and session helpers for host record stores."""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def create_session_factory(
    database_url: str | None = None,
    *,
    engine: AsyncEngine | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Create a session factory from a database URL or an existing async engine."""

    if engine is None:
        if database_url is None:
            raise ValueError("database_url or engine is required")
        engine = create_async_engine(database_url)
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_tables(engine: AsyncEngine, metadata: sa.MetaData) -> None:
    """Create every table of metadata that does not exist yet."""

    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)
