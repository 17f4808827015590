"""Automatic Argon2 hashing of one credential field on host record create/update."""

from credential_hasher.application.services.credential_hasher import (
    CredentialHasher,
    CredentialRecord,
)
from credential_hasher.domain.errors import DoubleHashError, EmptyPasswordError, ValidationError
from credential_hasher.domain.hash_format import is_argon2_hash
from credential_hasher.domain.options import CredentialHasherOptions

__all__ = [
    "CredentialHasher",
    "CredentialHasherOptions",
    "CredentialRecord",
    "DoubleHashError",
    "EmptyPasswordError",
    "ValidationError",
    "is_argon2_hash",
]
