"""Sample rows inserted right after a table is first created."""

from datetime import datetime, timezone


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def user_rows() -> list[dict]:
    return [{"name": "Alice"}, {"name": "Bob"}, {"name": "Charlemagne"}]


def task_rows() -> list[dict]:
    # user ids refer to the seeded users above
    return [
        {
            "title": "Complete project documentation",
            "user_id": 1,
            "completion_time": _utc(2024, 1, 15),
        },
        {"title": "Review pull requests", "user_id": 2, "completion_time": None},
        {
            "title": "Deploy to production",
            "user_id": 3,
            "completion_time": _utc(2024, 1, 10),
        },
        {"title": "Update dependencies", "user_id": 1, "completion_time": None},
        {
            "title": "Write unit tests",
            "user_id": 2,
            "completion_time": _utc(2024, 1, 5),
        },
    ]


def model_rows() -> list[dict]:
    return [
        {
            "name": "Model 1",
            "version": "1.0.0",
            "description": "The first model",
            "model_uri": "https://example.com/models/model1",
            "registered_by": "Alice",
        },
        {
            "name": "Model 2",
            "version": "1.0.0",
            "description": "The second model",
            "model_uri": "https://example.com/models/model2",
            "registered_by": "Bob",
        },
    ]


def ingestion_job_rows() -> list[dict]:
    return [
        {
            "data_source_uri": "https://example.com/data.csv",
            "status": "completed",
            "created_at": _utc(2024, 1, 1),
            "completed_at": _utc(2024, 1, 2),
        },
        {
            "data_source_uri": "https://example.com/data2.csv",
            "status": "failed",
            "created_at": _utc(2024, 1, 3),
            "completed_at": _utc(2024, 1, 4),
        },
        {
            "data_source_uri": "https://example.com/data3.csv",
            "status": "in_progress",
            "created_at": _utc(2024, 1, 5),
            "completed_at": None,
        },
    ]
