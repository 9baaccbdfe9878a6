"""Schemas for model registry rows."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ModelRead(BaseModel):
    """A registered model as stored."""

    id: int
    name: str
    version: str
    description: Optional[str] = None
    model_uri: str
    registered_at: Optional[datetime] = None
    registered_by: Optional[str] = None

    class Config:
        from_attributes = True
        protected_namespaces = ()
