from pathlib import Path
from typing import Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Document store connection (e.g. postgresql+asyncpg://... or sqlite+aiosqlite:///...)
    DATABASE_URI: Optional[SecretStr] = None

    @field_validator('DATABASE_URI', mode='before')
    @classmethod
    def blank_uri_is_missing(cls, v: str | SecretStr | None) -> str | SecretStr | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Engine / pool tuning (ignored for SQLite)
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 1800  # seconds
    DB_POOL_PRE_PING: bool = True

    # Create tables and indexes on first connect
    DB_CREATE_SCHEMA: bool = True


settings = Settings()  # type: ignore
