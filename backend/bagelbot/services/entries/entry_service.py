"""Order entry service.

Handles intake of customer submissions (with daily order numbering), staff
listing and status updates. All results are returned as ``EntryRecord``.
"""

from collections.abc import Callable
from datetime import datetime

import structlog
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from bagelbot.models.entry import DEFAULT_ENTRY_STATUS, Entry
from bagelbot.services.entries.exceptions import EntryNotFound, MessageRequired, StatusRequired
from bagelbot.services.entries.order_numbers import OrderNumberAllocator
from bagelbot.services.entries.records import EntryRecord
from bagelbot.services.exceptions import DatastoreError
from bagelbot.utils.datetime_utils import utc_now
from bagelbot.utils.db_retry import get_db_retrying

logger = structlog.get_logger(__name__)


# Entry ids are a 32-bit serial column; anything outside cannot exist
MAX_ENTRY_ID = 2**31 - 1


def _is_blank(value: str) -> bool:
    return not value.strip()


class EntryService:
    """Service for order entry operations."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        allocator: OrderNumberAllocator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.session = session
        self.clock = clock
        self.allocator = allocator or OrderNumberAllocator(session, clock=clock)

    async def create_entry(
        self,
        *,
        message: str | None,
        name: str | None = None,
        phone_number: str | None = None,
    ) -> EntryRecord:
        """Number and store a new submission.

        Raises:
            MessageRequired: message missing or blank (nothing is allocated or stored)
            DatastoreError: the insert or allocation failed
        """
        if message is None or _is_blank(message):
            raise MessageRequired()

        try:
            async for attempt in get_db_retrying():
                with attempt:
                    entry = await self._insert_entry(message=message, name=name, phone_number=phone_number)
        except SQLAlchemyError as e:
            raise DatastoreError(f"Failed to create entry: {e}") from e

        structlog.contextvars.bind_contextvars(entry_id=entry.id, order_number=entry.order_number)
        logger.info("Entry submitted")
        return EntryRecord.from_model(entry)

    async def _insert_entry(self, *, message: str, name: str | None, phone_number: str | None) -> Entry:
        """Allocate a number and insert in one transaction; rolls back on failure."""
        created_at = self.clock()
        try:
            order_number = await self.allocator.next_order_number(created_at)
            entry = Entry(
                order_number=order_number,
                name=name,
                phone_number=phone_number,
                message=message,
                status=DEFAULT_ENTRY_STATUS,
                created_at=created_at,
            )
            self.session.add(entry)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        return entry

    async def list_entries(self, *, status: str | None = None) -> list[EntryRecord]:
        """List entries newest first, optionally filtered by exact status."""
        statement = select(Entry).order_by(col(Entry.created_at).desc(), col(Entry.id).desc())
        if status:
            statement = statement.where(Entry.status == status)

        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            raise DatastoreError(f"Failed to list entries: {e}") from e

        return [EntryRecord.from_model(entry) for entry in result.scalars().all()]

    async def update_status(self, entry_id: int, status: str | None) -> EntryRecord:
        """Set an entry's status label (any non-blank string).

        Raises:
            StatusRequired: status missing or blank
            EntryNotFound: no entry with this id (nothing is written)
            DatastoreError: the update failed
        """
        structlog.contextvars.bind_contextvars(entry_id=entry_id)
        if status is None or _is_blank(status):
            raise StatusRequired()
        if not 1 <= entry_id <= MAX_ENTRY_ID:
            raise EntryNotFound(f"Entry {entry_id} not found")

        statement = (
            update(Entry)
            .where(col(Entry.id) == entry_id)
            .values(status=status)
            .returning(Entry)
        )
        try:
            result = await self.session.execute(statement)
            entry = result.scalars().first()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatastoreError(f"Failed to update entry {entry_id}: {e}") from e

        if entry is None:
            raise EntryNotFound(f"Entry {entry_id} not found")

        logger.info("Entry status updated", entry_id=entry.id, order_number=entry.order_number, status=status)
        return EntryRecord.from_model(entry)
