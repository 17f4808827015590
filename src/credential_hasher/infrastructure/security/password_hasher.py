"""Argon2 password hasher adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort

if TYPE_CHECKING:
    from credential_hasher.config.settings import Settings


class Argon2PasswordHasher(PasswordHasherPort):
    """Password hashing adapter using argon2-cffi (Argon2id)."""

    def __init__(
        self,
        *,
        time_cost: int | None = None,
        memory_cost: int | None = None,
        parallelism: int | None = None,
        hash_len: int | None = None,
        salt_len: int | None = None,
    ) -> None:
        overrides: dict[str, Any] = {
            "time_cost": time_cost,
            "memory_cost": memory_cost,
            "parallelism": parallelism,
            "hash_len": hash_len,
            "salt_len": salt_len,
        }
        self._hasher = PasswordHasher(
            **{name: value for name, value in overrides.items() if value is not None}
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Argon2PasswordHasher:
        """Build adapter using Argon2 cost parameters from runtime settings."""

        return cls(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        )

    def hash_password(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError:
            return True
