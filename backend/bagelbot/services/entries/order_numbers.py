"""Daily order number allocation.

Order numbers are short, human-friendly and restart every business day at a
floor value (100 by default), e.g. "Order 101". They are unique within a day
but not across days.

Allocation is a single atomic statement against ``daily_order_counters``:

    UPDATE daily_order_counters SET last_value = last_value + 1
    WHERE day = :today RETURNING last_value

Only when the day has no counter yet is it seeded from the entries table
(max order number created today + 1, or the floor) and inserted with
``ON CONFLICT (day) DO UPDATE SET last_value = last_value + 1``. A concurrent
caller that loses the insert race falls into the increment branch, so two
submissions can never receive the same number. Gaps are possible (a rolled
back submission burns its number) and acceptable.
"""

import math
from collections.abc import Callable
from datetime import date, datetime

import structlog
from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bagelbot.config import settings
from bagelbot.db.upsert import dialect_insert
from bagelbot.models.entry import Entry
from bagelbot.models.order_counter import DailyOrderCounter
from bagelbot.utils.datetime_utils import business_day, business_day_bounds, utc_now

logger = structlog.get_logger(__name__)


def parse_order_number(raw: object) -> int | None:
    """Parse a stored order number, returning None for missing or corrupt values."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def next_from_max(raw_max: object, floor: int) -> int:
    """First number for a day given the raw MAX(order_number) seen for it.

    Unparsable data is treated as the start of the day.
    """
    parsed = parse_order_number(raw_max)
    if parsed is None:
        return floor
    return parsed + 1


class OrderNumberAllocator:
    """Hands out per-day order numbers inside the caller's transaction.

    The caller commits; until then the day's counter row stays locked
    (PostgreSQL) or the database is write-locked (SQLite), which serializes
    concurrent submissions for the same day.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        floor: int | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.session = session
        self.floor = settings.order_number_floor if floor is None else floor
        self.clock = clock

    async def next_order_number(self, at: datetime | None = None) -> int:
        """Allocate the next order number for the business day containing ``at``."""
        day = business_day(at or self.clock())

        value = await self._increment(day)
        if value is None:
            value = await self._seed(day)

        logger.debug("Allocated order number", order_day=day.isoformat(), order_number=value)
        return value

    async def _increment(self, day: date) -> int | None:
        stmt = (
            update(DailyOrderCounter)
            .where(DailyOrderCounter.day == day)  # type: ignore[arg-type]
            .values(last_value=DailyOrderCounter.last_value + 1)
            .returning(DailyOrderCounter.last_value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _seed(self, day: date) -> int:
        seed = next_from_max(await self._max_existing(day), self.floor)
        insert = dialect_insert(self.session, DailyOrderCounter)
        stmt = (
            insert.values(day=day, last_value=seed)
            .on_conflict_do_update(
                index_elements=["day"],
                set_={"last_value": DailyOrderCounter.last_value + 1},
            )
            .returning(DailyOrderCounter.last_value)
        )
        result = await self.session.execute(stmt)
        value: int = result.scalar_one()
        if value == seed:
            logger.info("Started order numbering for day", order_day=day.isoformat(), order_number=value)
        return value

    async def _max_existing(self, day: date) -> object:
        start, end = business_day_bounds(day)
        stmt = select(func.max(Entry.order_number)).where(
            Entry.created_at >= start,  # type: ignore[operator]
            Entry.created_at < end,  # type: ignore[operator]
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
