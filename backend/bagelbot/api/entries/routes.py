"""Entry intake and management endpoints."""

import structlog
from fastapi import APIRouter, HTTPException

from bagelbot.api.entries.dependencies import EntryServiceDep
from bagelbot.api.entries.schemas import (
    EntryListResponse,
    EntryResponse,
    SubmitEntryRequest,
    UpdateStatusRequest,
)
from bagelbot.services.exceptions import DatastoreError, NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["entries"])


@router.post("/submit", response_model=EntryResponse, operation_id="submitEntry")
async def submit_entry(
    payload: SubmitEntryRequest,
    service: EntryServiceDep,
) -> EntryResponse:
    """Receive a customer order and assign today's next order number."""
    try:
        entry = await service.create_entry(
            message=payload.message,
            name=payload.name,
            phone_number=payload.phone_number,
        )
        return EntryResponse(entry=entry)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatastoreError:
        logger.exception("Error submitting entry")
        raise HTTPException(status_code=500, detail="Failed to submit entry")


@router.get("/entries", response_model=EntryListResponse, operation_id="listEntries")
async def list_entries(
    service: EntryServiceDep,
    status: str | None = None,
) -> EntryListResponse:
    """List entries newest first, optionally only those with the given status."""
    try:
        entries = await service.list_entries(status=status)
        return EntryListResponse(entries=entries)
    except DatastoreError:
        logger.exception("Error fetching entries", status=status)
        raise HTTPException(status_code=500, detail="Failed to fetch entries")


@router.put("/entries/{entry_id}/status", response_model=EntryResponse, operation_id="updateEntryStatus")
async def update_entry_status(
    entry_id: int,
    payload: UpdateStatusRequest,
    service: EntryServiceDep,
) -> EntryResponse:
    """Change the status label of an entry (by id, not order number)."""
    try:
        entry = await service.update_status(entry_id, payload.status)
        return EntryResponse(entry=entry)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Entry not found")
    except DatastoreError:
        logger.exception("Error updating entry", entry_id=entry_id)
        raise HTTPException(status_code=500, detail="Failed to update entry")
