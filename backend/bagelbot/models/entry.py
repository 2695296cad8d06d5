"""Customer order entry model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text
from sqlmodel import Field, SQLModel

from bagelbot.utils.datetime_utils import utc_now

DEFAULT_ENTRY_STATUS = "New"


class Entry(SQLModel, table=True):
    """One submitted customer order.

    ``order_number`` is unique per business day only; ``id`` is the stable key
    used by staff to update the entry.
    """

    __tablename__ = "entries"

    id: int | None = Field(default=None, primary_key=True)
    order_number: int = Field(index=True)
    name: str | None = Field(default=None, sa_column=Column(String(100), nullable=True))
    phone_number: str | None = Field(default=None, sa_column=Column(String(20), nullable=True))
    message: str = Field(sa_column=Column(Text, nullable=False))
    status: str = Field(
        default=DEFAULT_ENTRY_STATUS,
        sa_column=Column(String(20), nullable=False, index=True),
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
