"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    person_one_key: str | None = None
    person_two_key: str | None = None
    person_keys: str | None = None
    catalog_path: str | None = None
    digest_debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_person_keys(raw: str | None) -> tuple[str, str] | None:
    """Parse a ``"Jm,Ren"`` style pair of person keys from env."""
    if raw is None:
        return None
    keys = [chunk.strip() for chunk in raw.split(",") if chunk.strip()]
    if len(keys) != 2:  # noqa: PLR2004
        return None
    return keys[0], keys[1]
