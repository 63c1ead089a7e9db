"""Service layer modules."""

from careerpath.services import (
    goal_service,
    insight_service,
    milestone_templates,
    profile_service,
    roadmap_service,
    skill_service,
)

__all__ = [
    "goal_service",
    "insight_service",
    "milestone_templates",
    "profile_service",
    "roadmap_service",
    "skill_service",
]
