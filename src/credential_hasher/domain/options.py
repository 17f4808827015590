"""Configuration value shared by every credential transform of one host type."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PASSWORD_FIELD = "password"


@dataclass(frozen=True)
class CredentialHasherOptions:
    """Which record field holds the credential and whether it may be empty."""

    password_field: str = DEFAULT_PASSWORD_FIELD
    allow_empty_password: bool = False

    def __post_init__(self) -> None:
        if not self.password_field.strip():
            raise ValueError("password_field cannot be blank")
