"""API schemas for entries endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from bagelbot.services.entries.records import EntryRecord

# =============================================================================
# Request Schemas
# =============================================================================


class SubmitEntryRequest(BaseModel):
    """Customer order submission.

    ``message`` is optional here so a missing message is reported by the
    service as a 400 with a readable error instead of a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, max_length=100)
    phone_number: str | None = Field(default=None, alias="phoneNumber", max_length=20)
    message: str | None = None


class UpdateStatusRequest(BaseModel):
    """Staff status change."""

    status: str | None = Field(default=None, max_length=20)


# =============================================================================
# Response Schemas
# =============================================================================


class EntryResponse(BaseModel):
    """Result of a submission or status update."""

    success: bool = True
    entry: EntryRecord


class EntryListResponse(BaseModel):
    """Entry list response schema."""

    entries: list[EntryRecord]
