"""External (wire) shape of an order entry.

Storage uses snake_case columns (``order_number``, ``phone_number``); clients
see camelCase (``orderNumber``, ``phoneNumber``). Every entry leaving the
service layer goes through ``EntryRecord.from_model``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from bagelbot.models.entry import Entry
from bagelbot.utils.datetime_utils import to_api_timezone


class EntryRecord(BaseModel):
    """Entry as exposed to API clients."""

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    id: int
    order_number: int = Field(alias="orderNumber")
    name: str | None = None
    phone_number: str | None = Field(default=None, alias="phoneNumber")
    message: str
    status: str
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, dt: datetime) -> str:
        """Serialize datetime to API timezone."""
        localized_dt = to_api_timezone(dt)
        assert localized_dt is not None
        return localized_dt.isoformat()

    @classmethod
    def from_model(cls, entry: Entry) -> "EntryRecord":
        """Create the external record from the Entry model."""
        return cls(
            id=entry.id,  # type: ignore[arg-type]
            order_number=entry.order_number,
            name=entry.name,
            phone_number=entry.phone_number,
            message=entry.message,
            status=entry.status,
            created_at=entry.created_at,
        )
