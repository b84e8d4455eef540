"""Root conftest - shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Tests never reach the configured PostgreSQL URL

Design Decisions:
    - SQLite in-memory: fast, no external dependency, enough for single-statement CRUD
"""

import os

# Set before todo_api.main is imported anywhere (get_settings is cached)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy import select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from todo_api.db.base import Base  # noqa: E402
from todo_api.models.project import Project  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_projects(test_db):
    """Insert three projects out of id order."""
    projects = [
        Project(id=3, name="Create TODO3", description="Create TODO basic structure3"),
        Project(id=1, name="Create TODO1", description="Create TODO basic structure1"),
        Project(id=2, name="Create TODO2", description="Create TODO basic structure2"),
    ]
    test_db.add_all(projects)
    await test_db.commit()
    return projects


@pytest.fixture
def fetch_projects(test_session_factory):
    """Read the table through a fresh session, ordered by id."""
    async def _fetch() -> list[Project]:
        async with test_session_factory() as session:
            result = await session.execute(select(Project).order_by(Project.id))
            return list(result.scalars().all())
    return _fetch
