"""API schemas for store status endpoints."""

from pydantic import BaseModel, Field

from bagelbot.services.store_status.store_status_service import StoreStatusRecord


class StoreStatusResponse(BaseModel):
    """Current store status."""

    store_closed: bool
    notes: str

    @classmethod
    def from_record(cls, record: StoreStatusRecord) -> "StoreStatusResponse":
        return cls(store_closed=record.store_closed, notes=record.notes)


class UpdateStoreStatusRequest(BaseModel):
    """Overwrite the store status."""

    store_closed: bool
    notes: str | None = Field(default=None)


class UpdateStoreStatusResponse(BaseModel):
    """Result of a store status update."""

    success: bool = True
    status: StoreStatusResponse
