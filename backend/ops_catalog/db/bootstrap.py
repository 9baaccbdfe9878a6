"""Idempotent schema bootstrap for the store tables.

Each table is checked for existence and, only when missing, created and
filled with its seed rows inside a single ``engine.begin()`` block. Running
the bootstrap against a database that already has the tables does nothing,
so seed rows are inserted at most once per database.

Tables are bootstrapped one after another in dependency order (``users``
before ``tasks``). A failure in one table is logged and recorded in the
returned report; the remaining tables are still attempted.
"""

import enum
from dataclasses import dataclass
from typing import Callable, Iterable

from ops_catalog.core.errors import UnknownTableError
from ops_catalog.core.logging import logger
from ops_catalog.db import seed
from ops_catalog.models.ingestion import DataIngestionJob
from ops_catalog.models.registry import RegisteredModel
from ops_catalog.models.tasks import Task
from ops_catalog.models.users import User
from sqlalchemy import Table, insert, inspect
from sqlalchemy.ext.asyncio import AsyncEngine


class BootstrapOutcome(str, enum.Enum):
    CREATED = "created"
    EXISTS = "exists"
    FAILED = "failed"


@dataclass(frozen=True)
class TableSpec:
    """A table definition paired with the rows to seed it with."""

    table: Table
    seed_rows: Callable[[], list[dict]]

    @property
    def name(self) -> str:
        return self.table.name


TABLE_SPECS: tuple[TableSpec, ...] = (
    TableSpec(User.__table__, seed.user_rows),
    TableSpec(Task.__table__, seed.task_rows),
    TableSpec(RegisteredModel.__table__, seed.model_rows),
    TableSpec(DataIngestionJob.__table__, seed.ingestion_job_rows),
)


class BootstrapReport(dict):
    """Mapping of table name to the :class:`BootstrapOutcome` of its bootstrap."""

    @property
    def failed(self) -> list[str]:
        return [name for name, outcome in self.items() if outcome is BootstrapOutcome.FAILED]

    @property
    def created(self) -> list[str]:
        return [name for name, outcome in self.items() if outcome is BootstrapOutcome.CREATED]

    @property
    def ok(self) -> bool:
        return not self.failed


def _find_spec(specs: Iterable[TableSpec], table_name: str) -> TableSpec:
    for spec in specs:
        if spec.name == table_name:
            return spec
    raise UnknownTableError(table_name)


def _create_and_seed(sync_conn, spec: TableSpec) -> bool:
    """Create ``spec.table`` and insert its seed rows if it does not exist.

    Runs on the sync side of an async connection via ``run_sync``.

    Returns:
        True if the table was created, False if it already existed.
    """

    if inspect(sync_conn).has_table(spec.name):
        return False

    spec.table.create(sync_conn)
    rows = spec.seed_rows()
    if rows:
        sync_conn.execute(insert(spec.table), rows)
    logger.info("Created table {} with {} seed rows", spec.name, len(rows))
    return True


async def ensure_table_exists(
    engine: AsyncEngine,
    table_name: str,
    specs: Iterable[TableSpec] = TABLE_SPECS,
) -> BootstrapOutcome:
    """Create and seed ``table_name`` unless it already exists.

    Args:
        engine: Engine for the target database.
        table_name: One of the names in ``specs``.
        specs: Table definitions to look ``table_name`` up in.

    Returns:
        BootstrapOutcome: ``CREATED``, ``EXISTS`` or ``FAILED``.

    Raises:
        UnknownTableError: If ``specs`` has no entry for ``table_name``.
    """

    spec = _find_spec(specs, table_name)
    try:
        async with engine.begin() as conn:
            created = await conn.run_sync(_create_and_seed, spec)
    except Exception:
        # NOTE: a broken table must not stop the others from bootstrapping;
        # accessors for it will fail when called instead.
        logger.exception("Error creating {} table", table_name)
        return BootstrapOutcome.FAILED

    if not created:
        logger.debug("Table {} already exists, skipping bootstrap", table_name)
        return BootstrapOutcome.EXISTS
    return BootstrapOutcome.CREATED


async def bootstrap_schema(
    engine: AsyncEngine, specs: Iterable[TableSpec] = TABLE_SPECS
) -> BootstrapReport:
    """Bootstrap every table in ``specs`` in order and report the outcomes."""

    specs = tuple(specs)
    report = BootstrapReport()
    for spec in specs:
        report[spec.name] = await ensure_table_exists(engine, spec.name, specs)

    if report.failed:
        logger.warning("Schema bootstrap finished with failures: {}", report.failed)
    else:
        logger.info("Schema bootstrap complete, created={}", report.created)
    return report
