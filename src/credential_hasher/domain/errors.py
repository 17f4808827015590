"""Policy errors raised before a record reaches persistence."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a credential field cannot be accepted for persistence."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class EmptyPasswordError(ValidationError):
    """Raised when the credential field is empty and empty values are not allowed."""

    def __init__(self, *, field: str) -> None:
        super().__init__("password must not be empty", field=field)


class DoubleHashError(ValidationError):
    """Raised when the submitted value is already an Argon2 hash."""

    def __init__(self, *, field: str) -> None:
        super().__init__("Argon2 tried to hash another Argon2 hash", field=field)
