import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
BIND_HOST = "0.0.0.0"


class LogSettings(BaseSettings):
    """Logging options, readable before the rest of the configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = "INFO"
    log_format: Literal["json", "plain"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_format(cls, value: str) -> str:
        return str(value).strip().lower()


class Settings(LogSettings):
    """Central application configuration."""

    app_env: str = "local"
    port: int = DEFAULT_PORT

    @field_validator("port", mode="before")
    @classmethod
    def coerce_port(cls, value: object) -> object:
        # Range is not checked here; an unusable port fails at bind time.
        if isinstance(value, int):
            return value
        raw = "" if value is None else str(value).strip()
        if not raw:
            return DEFAULT_PORT
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric PORT=%r, using %s", value, DEFAULT_PORT)
            return DEFAULT_PORT


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
