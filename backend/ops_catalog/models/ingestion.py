"""Models for tracking data ingestion jobs.

`DataIngestionJob` records the lifecycle of a single ingestion run. Status
values move pending -> in_progress -> completed | failed; `completed_at` is
only written together with a terminal status.
"""

import enum

from ops_catalog.db.session import Base
from ops_catalog.db.types import UTCDateTime
from sqlalchemy import Column, Integer, String
from sqlalchemy.sql import func


class IngestionStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class DataIngestionJob(Base):
    """Represents one ingestion of an external data source.

    Attributes:
        id: Primary key.
        data_source_uri: URI of the data being ingested.
        status: Current state (pending, in_progress, completed, failed).
        created_at: Job creation timestamp.
        completed_at: Optional timestamp of reaching a terminal state.
    """

    __tablename__ = "data_ingestion_jobs"

    id = Column(Integer, primary_key=True)
    data_source_uri = Column(String, nullable=False)
    status = Column(String, nullable=False)
    created_at = Column(UTCDateTime(), server_default=func.now())
    completed_at = Column(UTCDateTime(), nullable=True)
