"""SQL echo routing through loguru."""

import logging

import pytest
from ops_catalog.core.logging import InterceptHandler, logger
from ops_catalog.db.session import create_engine
from sqlalchemy import text


async def _echoed_statements(database_url, echo):
    messages = []
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    engine = create_engine(database_url, echo=echo)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 42"))
    finally:
        await engine.dispose()
        logger.remove(handler_id)
    return [m for m in messages if "SELECT 42" in m]


@pytest.mark.asyncio
async def test_echo_logs_each_statement_once(database_url):
    assert len(await _echoed_statements(database_url, echo=True)) == 1

    handlers = logging.getLogger("sqlalchemy.engine.Engine").handlers
    assert handlers
    assert all(isinstance(h, InterceptHandler) for h in handlers)


@pytest.mark.asyncio
async def test_statements_are_not_logged_without_echo(database_url):
    assert await _echoed_statements(database_url, echo=False) == []
