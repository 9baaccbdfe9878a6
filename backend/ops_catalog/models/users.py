"""User accounts that own tasks."""

from ops_catalog.db.session import Base
from sqlalchemy import Column, Integer, String


class User(Base):
    """Database model representing a user.

    Attributes:
        id: Primary key.
        name: Display name.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
