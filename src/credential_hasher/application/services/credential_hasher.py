"""Credential hashing policy applied to host records before they are persisted."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.application.ports.record_hooks_port import Record, RecordHooksPort
from credential_hasher.domain.errors import DoubleHashError, EmptyPasswordError
from credential_hasher.domain.hash_format import is_argon2_hash
from credential_hasher.domain.options import CredentialHasherOptions
from credential_hasher.infrastructure.security.password_hasher import Argon2PasswordHasher

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _shared_engine() -> PasswordHasherPort:
    return Argon2PasswordHasher()


async def _verify_with(engine: PasswordHasherPort, candidate: str, stored_hash: Any) -> bool:
    if not stored_hash or not isinstance(stored_hash, str):
        return False
    return await asyncio.to_thread(
        engine.verify_password,
        password=candidate,
        password_hash=stored_hash,
    )


class CredentialHasher(RecordHooksPort):
    """Hash one configured record field on create and on updates that change it.

    The hasher holds no per-record state: one instance serves every record of a
    host type. Hashing runs in a worker thread and always completes before the
    transform returns, so a host can await the hook and then persist.
    """

    def __init__(
        self,
        *,
        options: CredentialHasherOptions | None = None,
        password_hasher: PasswordHasherPort | None = None,
    ) -> None:
        self._options = options or CredentialHasherOptions()
        self._password_hasher = password_hasher or _shared_engine()

    @property
    def options(self) -> CredentialHasherOptions:
        return self._options

    @property
    def password_field(self) -> str:
        return self._options.password_field

    async def before_create(self, record: Record) -> Record:
        """Replace the plaintext credential of a new record with its hash."""

        await self._hash_field(record)
        return record

    async def before_update(self, record: Record, changed_fields: Iterable[str]) -> Record:
        """Hash the credential only when this update targets the password field."""

        if self.password_field not in set(changed_fields):
            logger.debug("field %r not in update payload; leaving stored hash", self.password_field)
            return record
        await self._hash_field(record)
        return record

    @staticmethod
    async def verify(candidate: str, stored_hash: str | None) -> bool:
        """Return whether candidate matches stored_hash; malformed hashes never match."""

        return await _verify_with(_shared_engine(), candidate, stored_hash)

    async def verify_with(self, candidate: str, stored_hash: str | None) -> bool:
        """Same as ``verify`` but using this instance's hashing engine."""

        return await _verify_with(self._password_hasher, candidate, stored_hash)

    async def verify_password(self, record: Record, candidate: str) -> bool:
        """Verify candidate against the hash stored in record."""

        return await self.verify_with(candidate, record.get(self.password_field))

    def needs_rehash(self, record: Record) -> bool:
        """Return whether the record's stored hash uses outdated Argon2 parameters."""

        stored_hash = record.get(self.password_field)
        if not stored_hash or not isinstance(stored_hash, str):
            return False
        return self._password_hasher.needs_rehash(stored_hash)

    def bind(self, record: Record) -> CredentialRecord:
        """Return a view that verifies candidates against this record's hash."""

        return CredentialRecord(hasher=self, record=record)

    async def _hash_field(self, record: Record) -> None:
        field = self.password_field
        value = record.get(field)

        if not value:
            if not self._options.allow_empty_password:
                raise EmptyPasswordError(field=field)
            logger.debug("field %r is empty and empty passwords are allowed", field)
            return

        if is_argon2_hash(value):
            logger.warning("refusing to hash field %r: value is already an Argon2 hash", field)
            raise DoubleHashError(field=field)

        record[field] = await asyncio.to_thread(self._password_hasher.hash_password, value)
        logger.debug("hashed field %r", field)


class CredentialRecord:
    """One host record paired with the hasher that manages its credential field."""

    def __init__(self, *, hasher: CredentialHasher, record: Record) -> None:
        self._hasher = hasher
        self._record = record

    @property
    def password_hash(self) -> str | None:
        return self._record.get(self._hasher.password_field) or None

    async def verify_password(self, candidate: str) -> bool:
        """Verify candidate against this record's stored hash."""

        return await self._hasher.verify_password(self._record, candidate)
