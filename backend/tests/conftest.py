"""Shared pytest fixtures for BagelBot tests."""

import os

# Settings are read at import time; configure before importing the app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["STORE_STATUS_API_KEY"] = "test-store-key"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["TIMEZONE"] = "UTC"

from collections.abc import AsyncIterator, Callable  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from pathlib import Path  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from bagelbot.db import build_engine, get_session, init_db  # noqa: E402
from bagelbot.main import app  # noqa: E402

STORE_KEY = "test-store-key"


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """Fresh file-backed SQLite database per test."""
    db_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'bagelbot.db'}")
    await init_db(db_engine)
    yield db_engine
    await db_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_maker() as db_session:
        yield db_session


@pytest.fixture
async def client(session_maker: async_sessionmaker[AsyncSession]) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client bound to the app with the test database."""

    async def _get_test_session() -> AsyncIterator[AsyncSession]:
        async with session_maker() as db_session:
            yield db_session

    app.dependency_overrides[get_session] = _get_test_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
def store_headers() -> dict[str, str]:
    return {"X-API-Key": STORE_KEY}


class SteppingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def make_clock() -> Callable[[datetime], SteppingClock]:
    return SteppingClock


@pytest.fixture
def noon_today() -> datetime:
    now = datetime.now(UTC)
    return now.replace(hour=12, minute=0, second=0, microsecond=0)
