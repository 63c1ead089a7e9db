"""Roadmap service: load-or-create, milestone toggling and progress."""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from careerpath.core.database import utc_now
from careerpath.core.exceptions import NotFoundError, StoreError
from careerpath.core.logging import get_logger
from careerpath.models.roadmap import Roadmap
from careerpath.schemas.roadmap import Milestone, RoadmapStatus
from careerpath.services import goal_service
from careerpath.services.milestone_templates import generate_milestones
from careerpath.stores.goal_store import GoalStore
from careerpath.stores.roadmap_store import RoadmapStore

logger = get_logger(__name__)


# ============================================================================
# Progress Calculation
# ============================================================================


def compute_progress(milestones: Sequence[Milestone]) -> int:
    """Percentage of completed milestones, rounded half up.

    0 completed of 0 = 0%, 1 of 6 = 17%, 6 of 6 = 100%.
    """
    if not milestones:
        return 0
    completed = sum(1 for m in milestones if m.completed)
    return int(100 * completed / len(milestones) + 0.5)


def load_milestones(roadmap: Roadmap) -> list[Milestone]:
    """Parse the stored milestone blob."""
    try:
        return [Milestone.model_validate(m) for m in roadmap.milestones or []]
    except PydanticValidationError as exc:
        logger.error("Stored milestones are corrupt", roadmap_id=roadmap.id)
        raise StoreError("roadmaps.decode", str(exc)) from exc


def get_roadmap_progress(roadmap: Roadmap) -> dict[str, Any]:
    """Build the roadmap read model; progress is derived on every call.

    Args:
        roadmap: Roadmap model

    Returns:
        Progress data with overall percentage and the milestone list
    """
    milestones = load_milestones(roadmap)
    return {
        "roadmap_id": roadmap.id,
        "career_goal_id": roadmap.career_goal_id,
        "title": roadmap.title,
        "status": roadmap.status,
        "progress": compute_progress(milestones),
        "completed_count": sum(1 for m in milestones if m.completed),
        "total_count": len(milestones),
        "milestones": milestones,
        "updated_at": roadmap.updated_at,
    }


# ============================================================================
# Load / Update
# ============================================================================


async def get_or_create_roadmap(
    roadmaps: RoadmapStore,
    goals: GoalStore,
    *,
    user_id: str,
    goal_id: str,
) -> Roadmap:
    """Return the goal's roadmap, generating and storing it on first access.

    A stored roadmap is returned as-is; the templates are not consulted
    again. Concurrent first calls converge on a single row.

    Raises:
        NotFoundError: the goal does not exist or belongs to someone else
    """
    goal = await goal_service.get_goal(goals, goal_id=goal_id, owner_id=user_id)

    roadmap = await roadmaps.select(goal_id, user_id)
    if roadmap is not None:
        return roadmap

    milestones = generate_milestones(goal.target_role)
    now = utc_now()
    inserted = await roadmaps.insert_if_absent(
        {
            "user_id": user_id,
            "career_goal_id": goal_id,
            "title": f"Roadmap for {goal.title}",
            "milestones": [m.model_dump(mode="json") for m in milestones],
            "status": RoadmapStatus.ACTIVE.value,
            "created_at": now,
            "updated_at": now,
        }
    )

    roadmap = await roadmaps.select(goal_id, user_id)
    if roadmap is None:
        raise StoreError("roadmaps.insert", "roadmap missing after insert")

    if inserted:
        logger.info(
            "Roadmap created",
            roadmap_id=roadmap.id,
            goal_id=goal_id,
            target_role=goal.target_role,
        )
    return roadmap


async def toggle_milestone(
    roadmaps: RoadmapStore,
    *,
    user_id: str,
    goal_id: str,
    milestone_id: str,
) -> Roadmap:
    """Flip one milestone's completed flag and write the whole list back.

    There is no concurrency token: a toggle computed from a stale read
    overwrites whatever was stored in between.

    Raises:
        NotFoundError: no roadmap for the goal, or no milestone with that id
    """
    roadmap = await roadmaps.select(goal_id, user_id)
    if roadmap is None:
        raise NotFoundError("Roadmap for goal", goal_id)

    milestones = list(roadmap.milestones or [])
    index = next(
        (i for i, m in enumerate(milestones) if str(m.get("id")) == milestone_id),
        None,
    )
    if index is None:
        raise NotFoundError("Milestone", milestone_id)

    # New list and dict objects so the JSON column registers the change
    updated = [dict(m) for m in milestones]
    updated[index]["completed"] = not updated[index].get("completed", False)

    roadmap = await roadmaps.update(
        goal_id,
        user_id,
        {"milestones": updated, "updated_at": utc_now()},
    )
    if roadmap is None:
        raise NotFoundError("Roadmap for goal", goal_id)

    logger.info(
        "Milestone toggled",
        roadmap_id=roadmap.id,
        milestone_id=milestone_id,
        completed=updated[index]["completed"],
    )
    return roadmap
