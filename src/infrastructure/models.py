"""
SQLAlchemy ORM models  (maps to PostgreSQL + PostGIS).

Tables
------
* ``runs`` -- community group run listings

Indexes
-------
* **GIST** on ``meeting_point`` for spatial queries.
* **B-Tree** on ``is_active`` (every seeker query filters on it) and a
  unique index on ``edit_token``.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    func,
)
from geoalchemy2 import Geometry

from .database import Base


class RunModel(Base):
    __tablename__ = "runs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    day_of_week = Column(String(10), nullable=False)
    start_time = Column(Text, nullable=False)
    location_name = Column(Text, nullable=False)

    # Stored as PostGIS geometry for spatial indexing
    meeting_point = Column(
        Geometry("POINT", srid=4326, spatial_index=False), nullable=True
    )

    # Also stored as plain floats for fast reads (avoids ST_X / ST_Y)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    typical_distances = Column(Text, nullable=False)
    terrain = Column(String(10), nullable=False)

    # {"sub_8": "consistently", "8_to_9": ..., "9_to_10": ..., "10_plus": ...}
    pace_groups = Column(JSON, nullable=False)

    contact_name = Column(Text, nullable=True)
    contact_email = Column(Text, nullable=True)
    contact_phone = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    edit_token = Column(String(64), unique=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("idx_runs_meeting_point", "meeting_point", postgresql_using="gist"),
        Index("idx_runs_active", "is_active"),
    )
