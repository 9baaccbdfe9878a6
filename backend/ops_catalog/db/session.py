"""Async SQLAlchemy engine and session helpers.

Provides the declarative ``Base`` shared by the table models and factories
for engines and sessionmakers. Engines are created by the caller that owns
them and passed explicitly to the store; nothing here holds a global engine.
"""

from ops_catalog.config.config import settings
from ops_catalog.core.logging import logger
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    """Build an async engine for ``database_url`` (defaults to settings).

    Pool sizing from settings is only applied to server backends; SQLite
    engines get foreign key enforcement switched on for every connection.

    Args:
        database_url: SQLAlchemy async URL, e.g. ``sqlite+aiosqlite:///x.db``.
        echo: Override for ``settings.DATABASE_ECHO``.

    Returns:
        AsyncEngine: A new engine. The caller is responsible for disposing it.
    """

    url = make_url(database_url or settings.DATABASE_URL_ASYNC)
    echo = settings.DATABASE_ECHO if echo is None else echo

    kwargs = {"echo": echo}
    if url.get_backend_name() != "sqlite":
        kwargs["pool_size"] = settings.DATABASE_POOL_SIZE
        kwargs["max_overflow"] = settings.DATABASE_MAX_OVERFLOW

    engine = create_async_engine(url, **kwargs)
    if url.get_backend_name() == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.debug(
        "Created engine backend={} driver={}",
        url.get_backend_name(),
        url.get_driver_name(),
    )
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a sessionmaker bound to ``engine``.

    Sessions keep attribute values after commit so returned rows can be
    read once the session is closed.
    """

    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
