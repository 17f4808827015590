"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from credential_hasher.domain.options import DEFAULT_PASSWORD_FIELD, CredentialHasherOptions

NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, Field(gt=0)]


class Settings(BaseSettings):
    """Environment-driven credential hashing settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_field: NonEmptyStr = Field(
        default=DEFAULT_PASSWORD_FIELD,
        validation_alias="PASSWORD_FIELD",
    )
    allow_empty_password: bool = Field(default=False, validation_alias="ALLOW_EMPTY_PASSWORD")
    argon2_time_cost: PositiveInt | None = Field(default=None, validation_alias="ARGON2_TIME_COST")
    argon2_memory_cost: PositiveInt | None = Field(
        default=None,
        validation_alias="ARGON2_MEMORY_COST",
    )
    argon2_parallelism: PositiveInt | None = Field(
        default=None,
        validation_alias="ARGON2_PARALLELISM",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    def to_options(self) -> CredentialHasherOptions:
        """Return the credential hook configuration described by these settings."""

        return CredentialHasherOptions(
            password_field=self.password_field,
            allow_empty_password=self.allow_empty_password,
        )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
