import sys
import os
from datetime import date
from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure project root is on sys.path so `import web` works
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Keep the module-level engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from database.base import Base
from database.models import Expense


# Test database URL (in-memory SQLite shared through a single connection)
TEST_DATABASE_URL = "sqlite+aiosqlite://"


def make_test_engine():
    """Create an in-memory engine that survives across sessions."""
    return create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    """Create async engine for tests."""
    engine = make_test_engine()
    
    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    
    yield engine
    
    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(async_engine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def sample_expense(db_session: AsyncSession) -> Expense:
    """Create sample expense for tests."""
    expense = Expense(
        title="A",
        amount=10.0,
        category="food",
        date=date(2024, 1, 1),
        note="x",
    )
    db_session.add(expense)
    await db_session.commit()
    await db_session.refresh(expense)
    return expense
