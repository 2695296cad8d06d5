"""Dialect-aware INSERT builders supporting ON CONFLICT clauses."""

from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession


def dialect_insert(session: AsyncSession, table: Any) -> Any:
    """Return an ``insert(table)`` for the session's dialect.

    Both returned constructs expose ``on_conflict_do_update``,
    ``on_conflict_do_nothing`` and ``excluded``.
    """
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(table)
    if dialect == "sqlite":
        return sqlite.insert(table)
    raise NotImplementedError(f"ON CONFLICT inserts are not supported for dialect {dialect!r}")
