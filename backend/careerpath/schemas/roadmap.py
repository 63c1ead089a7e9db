"""Roadmap schemas for API responses and the stored milestone blob."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class MilestoneCategory(str, Enum):
    SKILL = "skill"
    COURSE = "course"
    CERTIFICATION = "certification"
    EXPERIENCE = "experience"


class RoadmapStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class Milestone(BaseModel):
    """A step in a roadmap, stored embedded in the roadmap row."""

    id: str
    title: str
    description: str
    category: MilestoneCategory
    completed: bool = False
    order: int  # 1-based display position


class RoadmapProgress(BaseModel):
    """Roadmap with progress derived from its milestones."""

    roadmap_id: str
    career_goal_id: str
    title: str
    status: RoadmapStatus
    progress: int  # 0 to 100
    completed_count: int
    total_count: int
    milestones: list[Milestone]
    updated_at: datetime
