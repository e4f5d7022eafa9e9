import pytest
from datetime import datetime, timedelta, timezone
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from streak_tracker.database import Base, get_db
from streak_tracker.main import app
from streak_tracker.services.goals import GoalRegistry
from streak_tracker.services.tracker import GoalLocks, StreakTracker
from streak_tracker.storage.sql import SqlAlchemyStorage


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'streaks.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage(session):
    return SqlAlchemyStorage(session)


@pytest.fixture
def registry(storage):
    return GoalRegistry(storage)


@pytest.fixture
def tracker(storage):
    return StreakTracker(storage, locks=GoalLocks())


@pytest.fixture
async def goal(registry):
    return await registry.create_goal(
        name="Run 5k every day",
        deadline=datetime.now(timezone.utc) + timedelta(days=30),
        reason="Marathon in spring",
    )


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
