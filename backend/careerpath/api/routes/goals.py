"""Career goal routes, including the goal's roadmap and skill gap."""

from fastapi import APIRouter, status

from careerpath.api.deps import CurrentUser, Goals, MarketInsights, Roadmaps, Skills
from careerpath.core.config import get_settings
from careerpath.core.logging import get_logger
from careerpath.models import CareerGoal
from careerpath.schemas import (
    GoalCreate,
    GoalResponse,
    GoalStatusUpdate,
    GoalSummary,
    GoalUpdate,
    RoadmapProgress,
    SkillGapResponse,
)
from careerpath.services import goal_service, insight_service, roadmap_service

logger = get_logger(__name__)
router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("", response_model=list[GoalResponse])
async def list_goals(user_id: CurrentUser, goals: Goals) -> list[CareerGoal]:
    """List the caller's career goals, newest first."""
    return await goal_service.list_goals(goals, owner_id=user_id)


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(data: GoalCreate, user_id: CurrentUser, goals: Goals) -> CareerGoal:
    return await goal_service.create_goal(
        goals,
        owner_id=user_id,
        title=data.title,
        target_role=data.target_role,
        description=data.description,
        timeline_months=data.timeline_months,
    )


# Fixed paths must come before "/{goal_id}"
@router.get("/summary", response_model=GoalSummary)
async def summarize_goals(user_id: CurrentUser, goals: Goals) -> dict:
    """Goal counts per status for the dashboard."""
    return await goal_service.summarize_goals(goals, owner_id=user_id)


@router.get("/{goal_id}", response_model=GoalResponse)
async def get_goal(goal_id: str, user_id: CurrentUser, goals: Goals) -> CareerGoal:
    return await goal_service.get_goal(goals, goal_id=goal_id, owner_id=user_id)


@router.patch("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: str,
    data: GoalUpdate,
    user_id: CurrentUser,
    goals: Goals,
) -> CareerGoal:
    """Edit a goal; only the fields present in the body change."""
    return await goal_service.update_goal(
        goals,
        goal_id=goal_id,
        owner_id=user_id,
        **data.model_dump(exclude_unset=True),
    )


@router.put("/{goal_id}/status", response_model=GoalResponse)
async def set_goal_status(
    goal_id: str,
    data: GoalStatusUpdate,
    user_id: CurrentUser,
    goals: Goals,
) -> CareerGoal:
    return await goal_service.set_status(
        goals, goal_id=goal_id, owner_id=user_id, status=data.status
    )


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: str,
    user_id: CurrentUser,
    goals: Goals,
    roadmaps: Roadmaps,
) -> None:
    """Delete a goal and its roadmap."""
    await goal_service.delete_goal(goals, roadmaps, goal_id=goal_id, owner_id=user_id)


@router.get("/{goal_id}/roadmap", response_model=RoadmapProgress)
async def get_goal_roadmap(
    goal_id: str,
    user_id: CurrentUser,
    goals: Goals,
    roadmaps: Roadmaps,
) -> dict:
    """Get the goal's roadmap, generating it on first view."""
    roadmap = await roadmap_service.get_or_create_roadmap(
        roadmaps, goals, user_id=user_id, goal_id=goal_id
    )
    return roadmap_service.get_roadmap_progress(roadmap)


@router.post(
    "/{goal_id}/roadmap/milestones/{milestone_id}/toggle",
    response_model=RoadmapProgress,
)
async def toggle_milestone(
    goal_id: str,
    milestone_id: str,
    user_id: CurrentUser,
    roadmaps: Roadmaps,
) -> dict:
    """Flip a milestone between done and not done."""
    roadmap = await roadmap_service.toggle_milestone(
        roadmaps, user_id=user_id, goal_id=goal_id, milestone_id=milestone_id
    )
    return roadmap_service.get_roadmap_progress(roadmap)


@router.get("/{goal_id}/skill-gap", response_model=SkillGapResponse)
async def get_skill_gap(
    goal_id: str,
    user_id: CurrentUser,
    goals: Goals,
    skills: Skills,
    insights: MarketInsights,
) -> dict:
    return await insight_service.get_skill_gap(
        skills,
        goals,
        insights,
        user_id=user_id,
        goal_id=goal_id,
        limit=get_settings().MARKET_INSIGHT_LIMIT,
    )
