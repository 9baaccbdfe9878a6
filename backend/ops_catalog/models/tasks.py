"""Models for user-owned tasks.

A `Task` is complete once `completion_time` is set.
"""

from ops_catalog.db.session import Base
from ops_catalog.db.types import UTCDateTime
from sqlalchemy import Column, ForeignKey, Integer, String


class Task(Base):
    """Represents a task assigned to a user.

    Attributes:
        id: Primary key.
        title: Short description of the work.
        user_id: Foreign key to `users.id`.
        completion_time: Optional completion timestamp; NULL while open.
    """

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"))
    completion_time = Column(UTCDateTime(), nullable=True)
