"""FastAPI dependencies for the store status gate.

The key is checked while dependencies are resolved, so a request without a
valid key is rejected with 403 before its body is read or validated.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from bagelbot.api.store_status.schemas import UpdateStoreStatusRequest
from bagelbot.config import settings
from bagelbot.db import get_session
from bagelbot.services.exceptions import UnauthorizedError
from bagelbot.services.store_status.access import CredentialCheck, SharedSecretCheck
from bagelbot.services.store_status.store_status_service import StoreStatusService


def get_credential_check() -> CredentialCheck:
    """Credential check for store status access (shared secret from config)."""
    return SharedSecretCheck(settings.store_status_api_key)


def get_store_credential(request: Request) -> str | None:
    """Read the presented key from the configured header."""
    return request.headers.get(settings.store_status_key_header)


StoreCredentialDep = Annotated[str | None, Depends(get_store_credential)]


async def get_store_status_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    check: Annotated[CredentialCheck, Depends(get_credential_check)],
    credential: StoreCredentialDep,
) -> StoreStatusService:
    """Get an authorized StoreStatusService (403 on a missing or wrong key)."""
    service = StoreStatusService(session, check)
    try:
        service.authorize(credential)
    except UnauthorizedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return service


StoreStatusServiceDep = Annotated[StoreStatusService, Depends(get_store_status_service)]


async def get_store_status_update(request: Request, service: StoreStatusServiceDep) -> UpdateStoreStatusRequest:
    """Parse the update body; depends on the authorized service so it runs after the key check."""
    try:
        return UpdateStoreStatusRequest.model_validate_json(await request.body())
    except PydanticValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


StoreStatusUpdateDep = Annotated[UpdateStoreStatusRequest, Depends(get_store_status_update)]
