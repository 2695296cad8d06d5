"""Database models."""

from sqlmodel import SQLModel

from bagelbot.models.entry import DEFAULT_ENTRY_STATUS, Entry
from bagelbot.models.order_counter import DailyOrderCounter
from bagelbot.models.store_status import STORE_STATUS_ID, StoreStatus

__all__ = [
    "SQLModel",
    "DEFAULT_ENTRY_STATUS",
    "DailyOrderCounter",
    "Entry",
    "STORE_STATUS_ID",
    "StoreStatus",
]
