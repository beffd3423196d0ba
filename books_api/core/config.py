# books_api/core/config.py
import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, ValidationInfo

from books_api.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    # Application
    APP_TITLE: str = "Library API"
    APP_VERSION: str = "1.0.0"

    # Flat-file store
    DATABASE_FILE: str = "db.json"
    BOOKS_COLLECTION: str = "books"

    # Books
    ID_LENGTH: int = 8
    # Update/Delete on an unknown id: 404 when enabled, silent no-op otherwise
    STRICT_NOT_FOUND: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 4000
    RELOAD: bool = False

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator('DATABASE_FILE', 'BOOKS_COLLECTION')
    @classmethod
    def validate_not_empty(cls, v: str, info: ValidationInfo) -> str:
        if not v or not v.strip():
            raise ConfigurationError(f"{info.field_name} is required")
        return v

    @field_validator('ID_LENGTH')
    @classmethod
    def validate_id_length(cls, v: int) -> int:
        if v <= 0:
            raise ConfigurationError("ID_LENGTH must be a positive integer")
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown LOG_LEVEL: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Cached factory. The composition root calls it once, lru_cache guarantees
    a single Settings instance per process.
    """
    return Settings()
