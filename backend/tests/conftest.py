"""Shared fixtures: an in-memory database per test and an HTTP client over it."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from careerpath.api.deps import get_db
from careerpath.core.database import build_engine, build_session_factory, init_db
from careerpath.main import app
from careerpath.stores import GoalStore, MarketInsightStore, RoadmapStore, SkillStore, UserStore


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = build_session_factory(test_engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def goals(test_session: AsyncSession) -> GoalStore:
    return GoalStore(test_session)


@pytest_asyncio.fixture
async def roadmaps(test_session: AsyncSession) -> RoadmapStore:
    return RoadmapStore(test_session)


@pytest_asyncio.fixture
async def skills(test_session: AsyncSession) -> SkillStore:
    return SkillStore(test_session)


@pytest_asyncio.fixture
async def users(test_session: AsyncSession) -> UserStore:
    return UserStore(test_session)


@pytest_asyncio.fixture
async def insights(test_session: AsyncSession) -> MarketInsightStore:
    return MarketInsightStore(test_session)


@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests all run against ``test_session``."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield test_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


class FailingSession:
    """Stands in for an AsyncSession whose database has gone away."""

    rolled_back = False

    def add(self, instance: object) -> None:
        pass

    async def execute(self, *args: object, **kwargs: object) -> None:
        raise OperationalError("SELECT ...", {}, Exception("database is locked"))

    async def flush(self) -> None:
        raise OperationalError("INSERT ...", {}, Exception("disk I/O error"))

    async def commit(self) -> None:
        raise OperationalError("COMMIT", {}, Exception("could not serialize access"))

    async def rollback(self) -> None:
        self.rolled_back = True

    async def close(self) -> None:
        pass


@pytest.fixture
def failing_session() -> AsyncSession:
    return FailingSession()  # type: ignore[return-value]
