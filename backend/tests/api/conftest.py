"""Route test fixtures - FastAPI test clients for both storage backends.

Invariants:
    - client: db_manager swapped for one bound to the per-test SQLite database
    - memory_client: fresh InMemoryRepository stores on app.state
    - dependency overrides, db_manager and app.state restored after each test

Design Decisions:
    - Repositories and the readiness probe both reach the database through db_manager
    - httpx ASGITransport does not run the lifespan, so no real database is touched
"""

import pytest
from httpx import ASGITransport, AsyncClient

from casework.api.dependencies import use_memory_storage
from casework.infrastructure.database import DatabaseSessionManager
import casework.infrastructure.database as db_module
from casework.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client bound to the per-test SQLite database."""
    original_manager = db_module.db_manager
    test_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    test_manager.engine = test_engine
    test_manager._session_factory = test_session_factory
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def memory_stores():
    stores = use_memory_storage(app)
    yield stores
    del app.state.memory_repositories


@pytest.fixture
async def memory_client(memory_stores):
    """FastAPI test client backed by in-memory repositories."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
