from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone

# Geolocation is not resolved; every visit is recorded with this location.
UNKNOWN_LOCATION = "Unknown"


class Visitor(SQLModel, table=True):
    __tablename__ = "visitors"

    id: Optional[int] = Field(default=None, primary_key=True)
    ip: str
    location: str = Field(default=UNKNOWN_LOCATION)
    date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        index=True,
        nullable=False,
    )
