"""
QuickNote Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Inventory (all function-scoped):
    ├── memory_store:  Fresh InMemoryNoteStore
    ├── sql_store:     SqlAlchemyNoteStore over an in-memory SQLite database
    ├── failing_store: NoteStore whose every method raises
    ├── limits:        Default ValidationLimits (255 / 10000)
    └── test_client:   HTTPX AsyncClient with the memory store injected
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any quicknote imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quicknote.database import Base
from quicknote.models.note import Note  # noqa: F401
from quicknote.services.memory_note_store import InMemoryNoteStore
from quicknote.services.note_store import NoteStore
from quicknote.services.sql_note_store import SqlAlchemyNoteStore
from quicknote.services.validation import ValidationLimits


@pytest.fixture
def memory_store():
    return InMemoryNoteStore()


@pytest_asyncio.fixture
async def sql_store():
    """
    Provides a SqlAlchemyNoteStore backed by a private in-memory SQLite DB.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield SqlAlchemyNoteStore(factory)

    await engine.dispose()


@pytest.fixture
def failing_store():
    """
    A NoteStore whose operations all fail like a dropped database connection.

    Usage:
        with pytest.raises(DatabaseError):
            await service.get_all_notes(failing_store)
    """
    store = MagicMock(spec=NoteStore)
    error = ConnectionError("connection to server was lost")
    store.create = AsyncMock(side_effect=error)
    store.find_all = AsyncMock(side_effect=error)
    store.find_by_id = AsyncMock(side_effect=error)
    store.update = AsyncMock(side_effect=error)
    store.delete = AsyncMock(side_effect=error)
    return store


@pytest.fixture
def limits():
    return ValidationLimits(max_title=255, max_content=10_000)


@pytest_asyncio.fixture
async def test_client(memory_store):
    """
    HTTPX AsyncClient wired to the FastAPI app with the memory store injected.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
            assert response.status_code == 200
    """
    from quicknote.dependencies import get_note_store
    from quicknote.main import app

    app.dependency_overrides[get_note_store] = lambda: memory_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
