"""
SQLAlchemy ORM models.

Tables
------
* ``locations`` -- stored points of interest

Indexes
-------
* **B-Tree** on ``category``: every read path filters by exact category.
  Coordinates are plain floats; there is no spatial index.
"""

from sqlalchemy import Column, DateTime, Float, Index, String, func

from .database import Base


class LocationModel(Base):
    __tablename__ = "locations"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False, default="")
    address = Column(String(512), nullable=False, default="")
    latitude = Column(Float, nullable=False, default=0.0)
    longitude = Column(Float, nullable=False, default=0.0)
    category = Column(String(120), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (Index("idx_locations_category", "category"),)
