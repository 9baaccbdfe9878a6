"""Shared fixtures: a fresh SQLite database per test."""

import pytest
import pytest_asyncio
from ops_catalog.db.session import create_engine
from ops_catalog.services.store import Store
from sqlalchemy import text


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'ops_catalog.db'}"


@pytest_asyncio.fixture
async def engine(database_url):
    engine = create_engine(database_url, echo=False)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def store(engine):
    return await Store.connect(engine)


@pytest.fixture
def row_count(engine):
    async def _count(table_name: str) -> int:
        async with engine.connect() as conn:
            result = await conn.execute(text(f"SELECT COUNT(*) FROM {table_name}"))
            return result.scalar_one()

    return _count
