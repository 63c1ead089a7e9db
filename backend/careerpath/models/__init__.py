"""Database models."""

from careerpath.models.career_goal import CareerGoal
from careerpath.models.market_insight import MarketInsight
from careerpath.models.roadmap import Roadmap
from careerpath.models.skill import Skill
from careerpath.models.user import User

__all__ = [
    "User",
    "Skill",
    "CareerGoal",
    "Roadmap",
    "MarketInsight",
]
