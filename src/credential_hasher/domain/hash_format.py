"""Syntactic recognition of PHC-encoded Argon2 hashes."""

from __future__ import annotations

import re

# $argon2id$v=19$m=65536,t=3,p=4$<salt>$<digest>; version segment is absent in v1.0 hashes.
_ARGON2_HASH_PATTERN = re.compile(
    r"^\$argon2(?:i|d|id)"
    r"(?:\$v=\d+)?"
    r"\$m=\d+,t=\d+,p=\d+"
    r"\$[A-Za-z0-9+/.=-]+"
    r"\$[A-Za-z0-9+/.=-]+$"
)


def is_argon2_hash(value: object) -> bool:
    """Return whether value has the shape of an encoded Argon2 hash."""

    if not isinstance(value, str):
        return False
    return _ARGON2_HASH_PATTERN.match(value) is not None
