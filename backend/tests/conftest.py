"""Shared test fixtures."""

import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from taxonomy.database import Base
from taxonomy.dependencies import get_db
from taxonomy.main import app
from taxonomy.models.category import Category, CategoryStatus
from taxonomy.repositories import CategoryRepository


class RecordingCategoryRepository(CategoryRepository):
    """Repository that records which store calls were made."""

    def __init__(self, db):
        super().__init__(db)
        self.calls = []

    async def find_by_id(self, category_id):
        self.calls.append("find_by_id")
        return await super().find_by_id(category_id)

    async def find_children(self, parent_id):
        self.calls.append("find_children")
        return await super().find_children(parent_id)

    async def bulk_update(self, changes):
        self.calls.append("bulk_update")
        await super().bulk_update(changes)

    async def delete_by_id(self, category_id):
        self.calls.append("delete_by_id")
        await super().delete_by_id(category_id)


@pytest_asyncio.fixture
async def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        await session.close()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session):
    """Create a test client with database override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def repo(db_session):
    return CategoryRepository(db_session)


@pytest.fixture
def recording_repo(db_session):
    return RecordingCategoryRepository(db_session)


@pytest.fixture
def make_category(db_session):
    """Factory inserting a category directly into the database."""
    async def _make(name, parent=None, status=CategoryStatus.active):
        category = Category(
            id=str(uuid.uuid4()),
            name=name,
            parent_id=parent.id if parent is not None else None,
            status=status,
        )
        db_session.add(category)
        await db_session.commit()
        await db_session.refresh(category)
        return category

    return _make


@pytest_asyncio.fixture
async def category_chain(make_category):
    """root -> mid -> leaf, all active."""
    root = await make_category("Electronics")
    mid = await make_category("Computers", parent=root)
    leaf = await make_category("Laptops", parent=mid)
    return root, mid, leaf
