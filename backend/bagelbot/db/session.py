"""Database engine and session configuration."""

import ssl
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

# Register all models with SQLModel metadata
import bagelbot.models  # noqa: F401
from bagelbot.config import settings


def _insecure_ssl_context() -> ssl.SSLContext:
    """TLS context that encrypts but skips certificate verification (hosted Postgres)."""
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


def build_engine(database_url: str, *, database_ssl: bool = False) -> AsyncEngine:
    """Create an async engine for ``database_url``.

    SQLite (used in tests and local runs) gets a generous busy timeout so
    concurrent writers wait for the lock instead of failing immediately.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return create_async_engine(
            url,
            echo=False,  # SQL logging controlled via structlog configuration
            connect_args={"timeout": 30},
        )

    connect_args: dict[str, Any] = {}
    if database_ssl:
        connect_args["ssl"] = _insecure_ssl_context()

    return create_async_engine(
        url,
        echo=False,
        future=True,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=300,  # Recycle connections after 5 minutes
        connect_args=connect_args,
    )


engine = build_engine(settings.database_url, database_ssl=settings.database_ssl)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Dependency that provides an async database session."""
    async with async_session_maker() as session:
        yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose of the engine and release all connections.

    Should be called during application shutdown.
    """
    await engine.dispose()
