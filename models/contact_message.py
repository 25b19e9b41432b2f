from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


class ContactMessageBase(SQLModel):
    name: str
    email: str
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str


class ContactMessage(ContactMessageBase, table=True):
    __tablename__ = "contact_messages"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        nullable=False,
    )
