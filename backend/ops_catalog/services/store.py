"""Data-access store for users, tasks, registered models and ingestion jobs.

The :class:`Store` wraps an explicitly passed async engine. The schema
bootstrap runs in :meth:`Store.initialize` and must finish before any
accessor is used; :meth:`Store.connect` and :func:`open_store` do both steps
for the caller.

Error handling is fixed per accessor: the list readers log store failures
(including rows that do not fit the read schema) and return an empty list;
every writer lets the SQLAlchemy error propagate.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Optional

from ops_catalog.core.errors import StoreNotReadyError
from ops_catalog.core.logging import logger
from ops_catalog.db.bootstrap import TABLE_SPECS, BootstrapReport, bootstrap_schema
from ops_catalog.db.session import create_engine, create_sessionmaker
from ops_catalog.models.ingestion import DataIngestionJob, IngestionStatus
from ops_catalog.models.registry import RegisteredModel
from ops_catalog.models.tasks import Task
from ops_catalog.models.users import User
from ops_catalog.schemas.ingestion import IngestionJobRead
from ops_catalog.schemas.registry import ModelRead
from ops_catalog.schemas.tasks import TaskRead, TaskWithUser
from pydantic import ValidationError
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql import func


class Store:
    """Per-entity accessors over a relational database.

    Responsibilities:
        - Create and seed the four tables on first use.
        - List and insert tasks, registered models and ingestion jobs.
        - Move ingestion jobs through their status transitions.
    """

    def __init__(self, engine: AsyncEngine, specs=TABLE_SPECS):
        self.engine = engine
        self._specs = specs
        self._sessionmaker = create_sessionmaker(engine)
        self._ready = False
        self.bootstrap_report: BootstrapReport | None = None

    @classmethod
    async def connect(cls, engine: AsyncEngine, **kwargs) -> "Store":
        """Build a store for ``engine`` and wait for its bootstrap to finish."""
        store = cls(engine, **kwargs)
        await store.initialize()
        return store

    @property
    def ready(self) -> bool:
        return self._ready

    async def initialize(self) -> BootstrapReport:
        """Run the schema bootstrap and mark the store usable.

        Tables that fail to bootstrap are logged and reported; the store is
        still marked ready so the other tables remain accessible.

        Returns:
            BootstrapReport: Outcome per table.
        """

        logger.info("Initializing store tables if not exist")
        self.bootstrap_report = await bootstrap_schema(self.engine, self._specs)
        self._ready = True
        return self.bootstrap_report

    def _require_ready(self) -> None:
        if not self._ready:
            raise StoreNotReadyError(
                "Store.initialize() must complete before accessors are used"
            )

    # Tasks

    async def get_tasks(self) -> list[TaskWithUser]:
        """Return all tasks joined with the owning user's name.

        Returns:
            A list of tasks, or an empty list if the query failed.
        """
        self._require_ready()
        stmt = select(
            Task.id,
            Task.title,
            Task.user_id,
            Task.completion_time,
            User.name.label("user_name"),
        ).join(User, Task.user_id == User.id).order_by(Task.id)

        try:
            async with self._sessionmaker() as db:
                result = await db.execute(stmt)
                rows = result.mappings().all()
            return [TaskWithUser.model_validate(dict(row)) for row in rows]
        except (SQLAlchemyError, ValidationError):
            logger.exception("Failed to fetch tasks")
            return []

    async def add_task(
        self,
        title: str,
        user_id: int,
        completion_time: Optional[datetime] = None,
    ) -> TaskRead:
        """Insert a task and return it with its assigned id.

        Args:
            title: Task title.
            user_id: Id of an existing user.
            completion_time: Completion timestamp; omit for an open task.

        Raises:
            sqlalchemy.exc.IntegrityError: If ``user_id`` references no user.
        """
        self._require_ready()
        async with self._sessionmaker() as db:
            task = Task(title=title, user_id=user_id, completion_time=completion_time)
            db.add(task)
            await db.commit()
            await db.refresh(task)
            logger.debug("Created task id={} user_id={}", task.id, user_id)
            return TaskRead.model_validate(task)

    # Models

    async def get_models(self) -> list[ModelRead]:
        """Return every registered model, or an empty list if the query failed."""
        self._require_ready()
        try:
            async with self._sessionmaker() as db:
                result = await db.execute(select(RegisteredModel).order_by(RegisteredModel.id))
                models = result.scalars().all()
            return [ModelRead.model_validate(model) for model in models]
        except (SQLAlchemyError, ValidationError):
            logger.exception("Failed to fetch models")
            return []

    async def add_model(
        self,
        name: str,
        version: str,
        description: Optional[str],
        model_uri: str,
        registered_by: Optional[str] = None,
    ) -> ModelRead:
        """Register a model and return the stored row.

        ``registered_at`` is filled in by the database clock.
        """
        self._require_ready()
        async with self._sessionmaker() as db:
            model = RegisteredModel(
                name=name,
                version=version,
                description=description,
                model_uri=model_uri,
                registered_by=registered_by,
            )
            db.add(model)
            await db.commit()
            await db.refresh(model)
            logger.debug("Registered model id={} name={} version={}", model.id, name, version)
            return ModelRead.model_validate(model)

    # Data ingestion jobs

    async def get_data_ingestion_jobs(self) -> list[IngestionJobRead]:
        """Return every ingestion job, or an empty list if the query failed."""
        self._require_ready()
        try:
            async with self._sessionmaker() as db:
                result = await db.execute(select(DataIngestionJob).order_by(DataIngestionJob.id))
                jobs = result.scalars().all()
            return [IngestionJobRead.model_validate(job) for job in jobs]
        except (SQLAlchemyError, ValidationError):
            logger.exception("Failed to fetch data ingestion jobs")
            return []

    async def add_data_ingestion_job(self, data_source_uri: str) -> IngestionJobRead:
        """Create a ``pending`` ingestion job for ``data_source_uri``."""
        self._require_ready()
        async with self._sessionmaker() as db:
            job = DataIngestionJob(
                data_source_uri=data_source_uri,
                status=IngestionStatus.PENDING.value,
            )
            db.add(job)
            await db.commit()
            await db.refresh(job)
            logger.info("Created ingestion job id={} uri={}", job.id, data_source_uri)
            return IngestionJobRead.model_validate(job)

    async def start_data_ingestion_job(self, job_id: int) -> None:
        """Set a job to ``in_progress``. Unknown ids are ignored."""
        await self._update_job(job_id, status=IngestionStatus.IN_PROGRESS.value)

    async def complete_data_ingestion_job(self, job_id: int) -> None:
        """Set a job to ``completed`` and stamp ``completed_at``."""
        await self._finish_job(job_id, IngestionStatus.COMPLETED)

    async def fail_data_ingestion_job(self, job_id: int) -> None:
        """Set a job to ``failed`` and stamp ``completed_at``."""
        await self._finish_job(job_id, IngestionStatus.FAILED)

    async def _finish_job(self, job_id: int, status: IngestionStatus) -> None:
        await self._update_job(job_id, status=status.value, completed_at=func.now())

    async def _update_job(self, job_id: int, **values) -> None:
        # NOTE: no transition check; repeated calls re-apply the same update.
        self._require_ready()
        stmt = (
            update(DataIngestionJob)
            .where(DataIngestionJob.id == job_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with self._sessionmaker() as db:
            result = await db.execute(stmt)
            await db.commit()
        if result.rowcount == 0:
            logger.debug("No ingestion job with id={}, nothing updated", job_id)
        else:
            logger.info("Ingestion job id={} set to {}", job_id, values["status"])


@asynccontextmanager
async def open_store(database_url: str | None = None) -> AsyncIterator[Store]:
    """Create an engine, connect a :class:`Store` and dispose the engine on exit.

    Usage:
        async with open_store() as store:
            jobs = await store.get_data_ingestion_jobs()

    Yields:
        Store: An initialized store.
    """

    engine = create_engine(database_url)
    logger.info("Starting up")
    try:
        yield await Store.connect(engine)
    finally:
        logger.info("Shutting down")
        await engine.dispose()
