"""Port for lifecycle hooks a host persistence layer invokes before writing."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from typing import Any, Protocol

Record = MutableMapping[str, Any]


class RecordHooksPort(Protocol):
    """Transforms applied to one in-memory record before it is persisted."""

    async def before_create(self, record: Record) -> Record:
        """Prepare a new record prior to insert."""

    async def before_update(self, record: Record, changed_fields: Iterable[str]) -> Record:
        """Prepare an update payload prior to write, given the fields it changes."""
