"""Application settings loaded from environment for the ops-catalog store.

This module defines the :class:`Settings` model (based on Pydantic's
``BaseSettings``) and instantiates ``settings`` which is imported across
the package to access configuration values.

Notable fields include the async database URL used to build the engine,
connection pool sizing and the log level.
"""

from pathlib import Path

from pydantic_settings import BaseSettings

BACKEND_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BACKEND_DIR / ".env"


class Settings(BaseSettings):
    """Environment-backed store settings.

    Attributes:
        DATABASE_URL_ASYNC: Async database URL for SQLAlchemy.
        DATABASE_ECHO: Echo emitted SQL through the ``sqlalchemy.engine`` logger.
        DATABASE_POOL_SIZE: Connection pool size (non-SQLite backends).
        DATABASE_MAX_OVERFLOW: Connections allowed beyond the pool size.

        LOG_LEVEL: Minimum level for the stdout log sink.
    """

    DATABASE_URL_ASYNC: str = "sqlite+aiosqlite:///./ops_catalog.db"
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = str(ENV_FILE)
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
