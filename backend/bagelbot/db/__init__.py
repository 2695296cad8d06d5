"""Database package with engine, session management and upsert helpers."""

from bagelbot.db.session import (
    async_session_maker,
    build_engine,
    dispose_engine,
    engine,
    get_session,
    init_db,
)
from bagelbot.db.upsert import dialect_insert

__all__ = [
    "async_session_maker",
    "build_engine",
    "dialect_insert",
    "dispose_engine",
    "engine",
    "get_session",
    "init_db",
]
