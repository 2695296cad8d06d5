"""FastAPI dependencies for entry service injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bagelbot.db import get_session
from bagelbot.services.entries.entry_service import EntryService


async def get_entry_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> EntryService:
    """Get an EntryService instance with the current session."""
    return EntryService(session)


EntryServiceDep = Annotated[EntryService, Depends(get_entry_service)]
