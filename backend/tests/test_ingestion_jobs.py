"""Data ingestion job creation and status transitions."""

import pytest
from ops_catalog.models.ingestion import IngestionStatus
from sqlalchemy import text
from sqlalchemy.exc import OperationalError


async def _job(store, job_id):
    return next(job for job in await store.get_data_ingestion_jobs() if job.id == job_id)


@pytest.mark.asyncio
async def test_seeded_jobs(store):
    jobs = await store.get_data_ingestion_jobs()

    assert [job.status for job in jobs] == [
        IngestionStatus.COMPLETED,
        IngestionStatus.FAILED,
        IngestionStatus.IN_PROGRESS,
    ]
    assert jobs[0].completed_at is not None
    assert jobs[2].completed_at is None


@pytest.mark.asyncio
async def test_add_job_starts_pending(store):
    job = await store.add_data_ingestion_job("s3://raw/events.parquet")

    assert job.id == 4
    assert job.status == "pending"
    assert job.created_at is not None
    assert job.completed_at is None


@pytest.mark.asyncio
async def test_start_leaves_completed_at_unset(store):
    job = await store.add_data_ingestion_job("s3://raw/events.parquet")

    await store.start_data_ingestion_job(job.id)

    started = await _job(store, job.id)
    assert started.status is IngestionStatus.IN_PROGRESS
    assert started.completed_at is None


@pytest.mark.asyncio
async def test_complete_sets_completed_at(store):
    job = await store.add_data_ingestion_job("s3://raw/events.parquet")
    await store.start_data_ingestion_job(job.id)

    await store.complete_data_ingestion_job(job.id)

    done = await _job(store, job.id)
    assert done.status is IngestionStatus.COMPLETED
    assert done.completed_at is not None
    assert done.completed_at >= done.created_at


@pytest.mark.asyncio
async def test_fail_sets_completed_at(store):
    job = await store.add_data_ingestion_job("s3://raw/broken.csv")

    await store.fail_data_ingestion_job(job.id)

    failed = await _job(store, job.id)
    assert failed.status is IngestionStatus.FAILED
    assert failed.completed_at is not None
    assert failed.completed_at >= failed.created_at


@pytest.mark.asyncio
async def test_transitions_are_not_validated(store):
    job = await store.add_data_ingestion_job("s3://raw/events.parquet")

    await store.complete_data_ingestion_job(job.id)
    await store.complete_data_ingestion_job(job.id)
    await store.fail_data_ingestion_job(job.id)

    assert (await _job(store, job.id)).status is IngestionStatus.FAILED


@pytest.mark.asyncio
async def test_start_unknown_job_is_a_no_op(store):
    before = await store.get_data_ingestion_jobs()

    await store.start_data_ingestion_job(12345)

    assert await store.get_data_ingestion_jobs() == before


@pytest.mark.asyncio
async def test_writes_propagate_store_errors(store, engine):
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE data_ingestion_jobs"))

    assert await store.get_data_ingestion_jobs() == []
    with pytest.raises(OperationalError):
        await store.add_data_ingestion_job("s3://raw/events.parquet")
    with pytest.raises(OperationalError):
        await store.complete_data_ingestion_job(1)


@pytest.mark.asyncio
async def test_unknown_status_written_elsewhere_is_swallowed(store, engine):
    async with engine.begin() as conn:
        await conn.execute(
            text(
                "INSERT INTO data_ingestion_jobs (data_source_uri, status) "
                "VALUES ('s3://raw/other-tool.csv', 'queued')"
            )
        )

    assert await store.get_data_ingestion_jobs() == []
