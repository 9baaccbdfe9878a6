"""Schemas for task rows returned by the store."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class TaskBase(BaseModel):
    """Base representation of a task."""

    title: str
    user_id: Optional[int] = None
    completion_time: Optional[datetime] = None

    class Config:
        from_attributes = True


class TaskRead(TaskBase):
    """A stored task."""

    id: int


class TaskWithUser(TaskRead):
    """A stored task joined with its owner's name."""

    user_name: str
