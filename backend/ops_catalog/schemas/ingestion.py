"""Schemas for data ingestion job rows."""

from datetime import datetime
from typing import Optional

from ops_catalog.models.ingestion import IngestionStatus
from pydantic import BaseModel


class IngestionJobRead(BaseModel):
    """Response shape for a data ingestion job."""

    id: int
    data_source_uri: str
    status: IngestionStatus
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True
