"""Pydantic schemas."""

from careerpath.schemas.goal import (
    GoalCreate,
    GoalResponse,
    GoalStatus,
    GoalStatusUpdate,
    GoalSummary,
    GoalUpdate,
)
from careerpath.schemas.market_insight import MarketInsightResponse, SkillGapResponse
from careerpath.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from careerpath.schemas.roadmap import (
    Milestone,
    MilestoneCategory,
    RoadmapProgress,
    RoadmapStatus,
)
from careerpath.schemas.skill import SkillCreate, SkillResponse

__all__ = [
    "GoalCreate",
    "GoalResponse",
    "GoalStatus",
    "GoalStatusUpdate",
    "GoalSummary",
    "GoalUpdate",
    "Milestone",
    "MilestoneCategory",
    "RoadmapProgress",
    "RoadmapStatus",
    "SkillCreate",
    "SkillResponse",
    "ProfileCreate",
    "ProfileUpdate",
    "ProfileResponse",
    "MarketInsightResponse",
    "SkillGapResponse",
]
