"""SQLAlchemy record store that runs credential hooks before every write."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from credential_hasher.application.ports.record_hooks_port import RecordHooksPort

logger = logging.getLogger(__name__)


class SqlAlchemyRecordStore:
    """Persist rows of one table, letting hooks transform each payload first.

    The table must expose an integer ``id`` primary key column. Hooks run on a
    copy of the caller's payload; a hook error propagates before any statement
    is sent to the database.
    """

    def __init__(
        self,
        *,
        table: sa.Table,
        session_factory: async_sessionmaker[AsyncSession],
        hooks: RecordHooksPort,
    ) -> None:
        self._table = table
        self._session_factory = session_factory
        self._hooks = hooks

    async def insert(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Run create hooks, insert one row and return it as stored."""

        record = dict(values)
        await self._hooks.before_create(record)

        statement = sa.insert(self._table).values(**record).returning(*self._table.c)
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(statement)
                row = result.mappings().one()

        logger.debug("inserted row id=%s into %s", row["id"], self._table.name)
        return dict(row)

    async def patch(self, record_id: int, changes: Mapping[str, Any]) -> dict[str, Any] | None:
        """Run update hooks on the changed fields, apply them and return the fresh row."""

        payload = dict(changes)
        await self._hooks.before_update(payload, payload.keys())
        if not payload:
            return await self.get(record_id)

        statement = (
            sa.update(self._table)
            .where(self._table.c.id == record_id)
            .values(**payload)
            .returning(*self._table.c)
        )
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(statement)
                row = result.mappings().first()

        if row is None:
            return None
        logger.debug(
            "patched row id=%s in %s fields=%s",
            record_id,
            self._table.name,
            sorted(payload),
        )
        return dict(row)

    async def get(self, record_id: int) -> dict[str, Any] | None:
        """Return one row by id or None."""

        statement = sa.select(self._table).where(self._table.c.id == record_id).limit(1)
        async with self._session_factory() as session:
            result = await session.execute(statement)

        row = result.mappings().first()
        if row is None:
            return None
        return dict(row)
