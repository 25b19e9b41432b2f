from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VisitorStats(BaseModel):
    total_visitors: int = Field(alias="totalVisitors")
    last_visitor: Optional[datetime] = Field(default=None, alias="lastVisitor")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("last_visitor")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Some backends (SQLite) hand timestamps back without their offset
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
