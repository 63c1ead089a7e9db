"""Persistence boundary: one store per table, each over an injected session."""

from careerpath.stores.base import BaseStore
from careerpath.stores.goal_store import GoalStore
from careerpath.stores.market_insight_store import MarketInsightStore
from careerpath.stores.roadmap_store import RoadmapStore
from careerpath.stores.skill_store import SkillStore
from careerpath.stores.user_store import UserStore

__all__ = [
    "BaseStore",
    "GoalStore",
    "MarketInsightStore",
    "RoadmapStore",
    "SkillStore",
    "UserStore",
]
