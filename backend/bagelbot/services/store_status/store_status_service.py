"""Store status service.

The store status is a single row (``id = 1``). Creating it is an
``INSERT ... ON CONFLICT DO NOTHING`` and writing it is one upsert, so
concurrent first reads or writes can never produce a second row.
"""

from dataclasses import dataclass

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bagelbot.db.upsert import dialect_insert
from bagelbot.models.store_status import STORE_STATUS_ID, StoreStatus
from bagelbot.services.exceptions import DatastoreError
from bagelbot.services.store_status.access import CredentialCheck, InvalidStoreKey

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StoreStatusRecord:
    """Snapshot of the store status."""

    store_closed: bool
    notes: str

    @classmethod
    def from_model(cls, status: StoreStatus) -> "StoreStatusRecord":
        return cls(store_closed=status.store_closed, notes=status.notes or "")


class StoreStatusService:
    """Read and overwrite the store status behind a credential check."""

    def __init__(self, session: AsyncSession, check: CredentialCheck):
        self.session = session
        self.check = check

    def authorize(self, credential: str | None) -> None:
        """Raise InvalidStoreKey unless the credential passes the check."""
        if not self.check(credential):
            logger.warning("Rejected store status request")
            raise InvalidStoreKey()

    async def get_status(self, credential: str | None) -> StoreStatusRecord:
        """Return the store status, creating the default row on first access."""
        self.authorize(credential)

        try:
            status = await self._fetch()
            if status is None:
                await self._create_default()
                status = await self._fetch()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatastoreError(f"Failed to read store status: {e}") from e

        assert status is not None
        return StoreStatusRecord.from_model(status)

    async def set_status(
        self,
        credential: str | None,
        *,
        store_closed: bool,
        notes: str | None = None,
    ) -> StoreStatusRecord:
        """Overwrite the store status (notes default to an empty string)."""
        self.authorize(credential)

        values = {"store_closed": store_closed, "notes": notes or ""}
        insert = dialect_insert(self.session, StoreStatus)
        statement = (
            insert.values(id=STORE_STATUS_ID, **values)
            .on_conflict_do_update(index_elements=["id"], set_=values)
            .returning(StoreStatus.store_closed, StoreStatus.notes)
        )
        try:
            result = await self.session.execute(statement)
            row = result.one()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatastoreError(f"Failed to write store status: {e}") from e

        logger.info("Store status updated", store_closed=row.store_closed, notes=row.notes)
        return StoreStatusRecord(store_closed=row.store_closed, notes=row.notes)

    async def _fetch(self) -> StoreStatus | None:
        result = await self.session.execute(select(StoreStatus).where(StoreStatus.id == STORE_STATUS_ID))
        return result.scalars().first()

    async def _create_default(self) -> None:
        insert = dialect_insert(self.session, StoreStatus)
        statement = insert.values(id=STORE_STATUS_ID, store_closed=False, notes="").on_conflict_do_nothing(
            index_elements=["id"]
        )
        await self.session.execute(statement)
        await self.session.commit()
        logger.info("Created default store status")
