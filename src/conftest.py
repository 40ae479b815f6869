import os

# Tests run against a throwaway SQLite file; must be set before src.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./wedding_rsvp.db")

from contextlib import asynccontextmanager  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.config.database import engine  # noqa: E402
from src.guests.repository import orm_models  # noqa: E402, F401
from src.main import app  # noqa: E402
from src.models.base import BaseModel  # noqa: E402


@pytest_asyncio.fixture
async def test_db():
    """Create the schema for one test and drop it afterwards."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides installed."""

    @asynccontextmanager
    async def _client_factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return _client_factory


@pytest_asyncio.fixture
async def client(client_factory):
    """Create a test client."""
    async with client_factory() as ac:
        yield ac
