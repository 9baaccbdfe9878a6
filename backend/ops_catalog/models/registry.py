"""Registered machine learning models."""

from ops_catalog.db.session import Base
from ops_catalog.db.types import UTCDateTime
from sqlalchemy import Column, Integer, String
from sqlalchemy.sql import func


class RegisteredModel(Base):
    """Database model for an entry in the model registry.

    Attributes:
        id: Primary key.
        name: Model name.
        version: Version label, e.g. ``1.0.0``.
        description: Optional free-text description.
        model_uri: Location of the model artifact.
        registered_at: Registration timestamp, set by the database.
        registered_by: Optional name of whoever registered it.
    """

    __tablename__ = "models"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    version = Column(String, nullable=False)
    description = Column(String)
    model_uri = Column(String, nullable=False)
    registered_at = Column(UTCDateTime(), server_default=func.now())
    registered_by = Column(String, nullable=True)
