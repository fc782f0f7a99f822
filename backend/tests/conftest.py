"""
Workboard Backend: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the whole suite.
How:   Every fixture that touches storage builds its own in-memory SQLite
       engine, so tests never share rows.

Fixture Hierarchy (all function-scoped):
    ├── test_settings: Settings pointing at in-memory SQLite, no seeding
    ├── storage: bare AsyncEngine for repository tests
    ├── employee_repository / task_repository: initialized repositories
    ├── app: application built by create_app(test_settings)
    ├── test_client: HTTPX AsyncClient with the app's lifespan running
    ├── client_for: open_client, for tests that build their own app
    └── employee_payload / task_payload: valid request bodies
"""

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Set before any workboard import: the module-level settings singleton and the
# module-level app in workboard.main are built from these on import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from workboard.config import Settings  # noqa: E402
from workboard.database import create_storage, dispose_storage  # noqa: E402
from workboard.main import create_app  # noqa: E402
from workboard.services.repository import (  # noqa: E402
    build_employee_repository,
    build_task_repository,
)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        seed_sample_data=False,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def storage(test_settings):
    engine = create_storage(test_settings)
    yield engine
    await dispose_storage(engine)


@pytest_asyncio.fixture
async def employee_repository(storage):
    repository = build_employee_repository(storage)
    await repository.initialize()
    return repository


@pytest_asyncio.fixture
async def task_repository(storage):
    repository = build_task_repository(storage)
    await repository.initialize()
    return repository


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@asynccontextmanager
async def open_client(app) -> AsyncIterator[AsyncClient]:
    """
    Run the app's lifespan and yield a client bound to it.

    ASGITransport does not send lifespan events, so startup (table creation,
    seeding) and shutdown are driven here explicitly.
    """
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def client_for():
    """Context-manager factory for tests that build their own app."""
    return open_client


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to a freshly started app.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    async with open_client(app) as client:
        yield client


@pytest.fixture
def employee_payload():
    return {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "phone": "0987654321",
        "address": "456 Oak Street",
        "joining_date": "2019-05-15",
    }


@pytest.fixture
def task_payload():
    return {
        "name": "Fix bug",
        "description": "desc",
        "assigned_to": "Jane",
        "priority": "high",
        "status": "open",
        "deadline": "2024-01-01",
    }
