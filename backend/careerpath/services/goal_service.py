"""Career goal lifecycle: creation, status transitions, edits and removal."""

from typing import Any

from careerpath.core.database import utc_now
from careerpath.core.exceptions import NotFoundError, ValidationError
from careerpath.core.logging import get_logger
from careerpath.models.career_goal import CareerGoal
from careerpath.schemas.goal import GoalStatus
from careerpath.services.validation import optional_text, require_range, require_text
from careerpath.stores.goal_store import GoalStore
from careerpath.stores.roadmap_store import RoadmapStore

logger = get_logger(__name__)

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
TARGET_ROLE_MAX_LENGTH = 100
MAX_TIMELINE_MONTHS = 120


def parse_status(status: str | GoalStatus) -> GoalStatus:
    """Validate a status value. No case folding: only the exact values are accepted."""
    try:
        return GoalStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in GoalStatus)
        raise ValidationError(
            f"Invalid goal status '{status}' (expected one of: {allowed})"
        ) from None


def _validate_timeline(timeline_months: int | None) -> int | None:
    if timeline_months is None:
        return None
    return int(
        require_range(
            timeline_months,
            "timeline_months",
            minimum=1,
            maximum=MAX_TIMELINE_MONTHS,
            integer=True,
        )
    )


async def create_goal(
    goals: GoalStore,
    *,
    owner_id: str,
    title: str,
    target_role: str,
    description: str | None = None,
    timeline_months: int | None = None,
) -> CareerGoal:
    """Create a career goal in the in_progress state."""
    now = utc_now()
    goal = CareerGoal(
        user_id=owner_id,
        title=require_text(title, "title", max_length=TITLE_MAX_LENGTH),
        target_role=require_text(target_role, "target_role", max_length=TARGET_ROLE_MAX_LENGTH),
        description=optional_text(description, "description", max_length=DESCRIPTION_MAX_LENGTH),
        timeline_months=_validate_timeline(timeline_months),
        status=GoalStatus.IN_PROGRESS.value,
        created_at=now,
        updated_at=now,
    )
    await goals.insert(goal)

    logger.info("Goal created", goal_id=goal.id, target_role=goal.target_role)
    return goal


async def get_goal(goals: GoalStore, *, goal_id: str, owner_id: str) -> CareerGoal:
    goal = await goals.get(goal_id, owner_id)
    if goal is None:
        raise NotFoundError("Career goal", goal_id)
    return goal


async def list_goals(goals: GoalStore, *, owner_id: str) -> list[CareerGoal]:
    """List the owner's goals, newest first."""
    return await goals.select(owner_id)


async def set_status(
    goals: GoalStore,
    *,
    goal_id: str,
    owner_id: str,
    status: str | GoalStatus,
) -> CareerGoal:
    """Move a goal to another status.

    Every transition is allowed, including leaving completed or abandoned.
    The roadmap's own status is tracked separately and is not touched.
    """
    new_status = parse_status(status)
    goal = await goals.update(
        goal_id,
        owner_id,
        {"status": new_status.value, "updated_at": utc_now()},
    )
    if goal is None:
        raise NotFoundError("Career goal", goal_id)

    logger.info("Goal status changed", goal_id=goal_id, status=new_status.value)
    return goal


async def update_goal(
    goals: GoalStore,
    *,
    goal_id: str,
    owner_id: str,
    **changes: Any,
) -> CareerGoal:
    """Edit goal fields. Keys left out of ``changes`` keep their current value."""
    fields: dict[str, Any] = {}
    if "title" in changes:
        fields["title"] = require_text(changes.pop("title"), "title", max_length=TITLE_MAX_LENGTH)
    if "target_role" in changes:
        fields["target_role"] = require_text(
            changes.pop("target_role"), "target_role", max_length=TARGET_ROLE_MAX_LENGTH
        )
    if "description" in changes:
        fields["description"] = optional_text(
            changes.pop("description"), "description", max_length=DESCRIPTION_MAX_LENGTH
        )
    if "timeline_months" in changes:
        fields["timeline_months"] = _validate_timeline(changes.pop("timeline_months"))
    if "status" in changes:
        fields["status"] = parse_status(changes.pop("status")).value
    if changes:
        raise ValidationError(f"Unknown goal fields: {', '.join(sorted(changes))}")

    fields["updated_at"] = utc_now()
    goal = await goals.update(goal_id, owner_id, fields)
    if goal is None:
        raise NotFoundError("Career goal", goal_id)

    logger.info("Goal updated", goal_id=goal_id, fields=sorted(fields))
    return goal


async def delete_goal(
    goals: GoalStore,
    roadmaps: RoadmapStore,
    *,
    goal_id: str,
    owner_id: str,
) -> None:
    """Delete a goal together with its roadmap."""
    if await goals.get(goal_id, owner_id) is None:
        raise NotFoundError("Career goal", goal_id)

    removed_roadmaps = await roadmaps.delete(goal_id, owner_id)
    await goals.delete(goal_id, owner_id)

    logger.info("Goal deleted", goal_id=goal_id, roadmaps_removed=removed_roadmaps)


async def summarize_goals(goals: GoalStore, *, owner_id: str) -> dict[str, Any]:
    """Count the owner's goals per status; every status is present."""
    counts = await goals.count_by_status(owner_id)
    by_status = {status: counts.get(status.value, 0) for status in GoalStatus}
    return {"total": sum(by_status.values()), "by_status": by_status}
