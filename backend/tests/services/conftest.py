"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager initialized for the readiness check
    - The process-wide listing cache is emptied around every client test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behavior such as FK enforcement is not exercised here)
    - StaticPool: every session shares the one in-memory connection
"""

import bcrypt
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import invoicing.models  # noqa: F401
from invoicing.db.base import Base
from invoicing.db.session import session_factory_for
from invoicing.infrastructure.database import get_db, DatabaseSessionManager
from invoicing.infrastructure.view_cache import view_cache
from invoicing.models.customer import Customer
from invoicing.models.user import User
import invoicing.infrastructure.database as db_module
from invoicing.main import app

TEST_PASSWORD = "123456"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return session_factory_for(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager
    view_cache._pages.clear()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
    view_cache._pages.clear()


@pytest.fixture
async def seed_customer(test_db) -> Customer:
    """Insert one customer so invoices have a valid customer_id."""
    customer = Customer(
        name="Evil Rabbit", email="evil@rabbit.com",
        image_url="/customers/evil-rabbit.png",
    )
    test_db.add(customer)
    await test_db.commit()
    await test_db.refresh(customer)
    return customer


@pytest.fixture
async def seed_user(test_db) -> User:
    """Insert a user whose password is TEST_PASSWORD (bcrypt, cheap rounds)."""
    user = User(
        name="User", email="user@nextmail.com",
        password=bcrypt.hashpw(
            TEST_PASSWORD.encode(), bcrypt.gensalt(rounds=4),
        ).decode(),
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user
