"""
Restaurant API — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite) with
       all four tables. StaticPool keeps the single connection alive, so
       sessions and HTTP requests within one test see the same data.

Fixture Hierarchy (all function-scoped):
    db_engine
    ├── db_session:   AsyncSession for service-level tests
    └── test_client:  HTTPX AsyncClient against the app, with
                      get_db_session overridden to use db_engine
"""

import os

# Override settings BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from datetime import datetime, timezone  # noqa: E402
from unittest.mock import patch  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from restaurant_api.database import Base, get_db_session  # noqa: E402
from restaurant_api.models import menu_item, order, reservation, testimonial  # noqa: E402,F401


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """
    A session bound to the test database.

    Usage:
        async def test_create(db_session):
            item = await menu_service.create_menu_item(db_session, data)
    """
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    Usage:
        async def test_menu(test_client):
            response = await test_client.get("/rpc/getMenuItems")
            assert response.status_code == 200
    """
    from restaurant_api.main import app

    factory = async_sessionmaker(db_engine, expire_on_commit=False)

    async def override_get_db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    # /health probes the module-level engine directly
    with patch("restaurant_api.routes.health.engine", db_engine):
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    app.dependency_overrides.clear()


@pytest.fixture
def menu_item_data():
    return {
        "name": "Grilled Salmon",
        "description": "With lemon butter",
        "category": "food",
        "price": 19.99,
        "image_url": "https://example.com/salmon.jpg",
    }


@pytest.fixture
def reservation_data():
    return {
        "customer_name": "Ana Souza",
        "customer_phone": "+55 11 99999-0000",
        "number_of_people": 4,
        "date": "2024-06-01",
        "time": "19:30",
    }


@pytest.fixture
def testimonial_data():
    return {
        "customer_name": "Marcos",
        "review": "Best feijoada in town.",
        "rating": 5,
        "date": datetime(2024, 5, 20, 12, 0, tzinfo=timezone.utc),
    }
