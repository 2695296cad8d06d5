"""Store status endpoints (shared-secret protected)."""

import structlog
from fastapi import APIRouter, HTTPException

from bagelbot.api.store_status.dependencies import StoreCredentialDep, StoreStatusServiceDep, StoreStatusUpdateDep
from bagelbot.api.store_status.schemas import (
    StoreStatusResponse,
    UpdateStoreStatusRequest,
    UpdateStoreStatusResponse,
)
from bagelbot.services.exceptions import DatastoreError, UnauthorizedError

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["store-status"])

# The body is parsed by StoreStatusUpdateDep after the key check; document it explicitly
UPDATE_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UpdateStoreStatusRequest.model_json_schema()}},
    }
}


@router.get("/store-status", response_model=StoreStatusResponse, operation_id="getStoreStatus")
async def get_store_status(
    service: StoreStatusServiceDep,
    credential: StoreCredentialDep,
) -> StoreStatusResponse:
    """Get whether the store is closed, with the staff note."""
    try:
        record = await service.get_status(credential)
        return StoreStatusResponse.from_record(record)
    except UnauthorizedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except DatastoreError:
        logger.exception("Error fetching store status")
        raise HTTPException(status_code=500, detail="Failed to fetch store status")


@router.put(
    "/store-status",
    response_model=UpdateStoreStatusResponse,
    operation_id="updateStoreStatus",
    openapi_extra=UPDATE_REQUEST_BODY,
)
async def update_store_status(
    service: StoreStatusServiceDep,
    credential: StoreCredentialDep,
    payload: StoreStatusUpdateDep,
) -> UpdateStoreStatusResponse:
    """Open or close the store and replace the staff note."""
    try:
        record = await service.set_status(credential, store_closed=payload.store_closed, notes=payload.notes)
        return UpdateStoreStatusResponse(status=StoreStatusResponse.from_record(record))
    except UnauthorizedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except DatastoreError:
        logger.exception("Error updating store status")
        raise HTTPException(status_code=500, detail="Failed to update store status")
