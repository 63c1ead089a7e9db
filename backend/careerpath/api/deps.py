"""API dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from careerpath.core.auth import get_auth_user
from careerpath.core.database import get_session
from careerpath.stores import (
    GoalStore,
    MarketInsightStore,
    RoadmapStore,
    SkillStore,
    UserStore,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db)]


def get_goal_store(db: DBSession) -> GoalStore:
    return GoalStore(db)


def get_roadmap_store(db: DBSession) -> RoadmapStore:
    return RoadmapStore(db)


def get_skill_store(db: DBSession) -> SkillStore:
    return SkillStore(db)


def get_user_store(db: DBSession) -> UserStore:
    return UserStore(db)


def get_market_insight_store(db: DBSession) -> MarketInsightStore:
    return MarketInsightStore(db)


# Caller identity forwarded by the identity provider (default: guest user)
CurrentUser = Annotated[str, Depends(get_auth_user)]

Goals = Annotated[GoalStore, Depends(get_goal_store)]
Roadmaps = Annotated[RoadmapStore, Depends(get_roadmap_store)]
Skills = Annotated[SkillStore, Depends(get_skill_store)]
Users = Annotated[UserStore, Depends(get_user_store)]
MarketInsights = Annotated[MarketInsightStore, Depends(get_market_insight_store)]
