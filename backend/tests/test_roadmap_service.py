"""Tests for roadmap_service: load-or-create, toggling and progress."""

import pytest

from careerpath.core.exceptions import NotFoundError, StoreError
from careerpath.models import CareerGoal, Roadmap
from careerpath.schemas.roadmap import Milestone, MilestoneCategory
from careerpath.services import goal_service, roadmap_service
from careerpath.stores import GoalStore, RoadmapStore

OWNER = "user-a"
OTHER = "user-b"


def _milestones(*completed: bool) -> list[Milestone]:
    return [
        Milestone(
            id=str(i),
            title=f"Step {i}",
            description="",
            category=MilestoneCategory.SKILL,
            completed=done,
            order=i,
        )
        for i, done in enumerate(completed, start=1)
    ]


class TestComputeProgress:
    def test_empty(self):
        assert roadmap_service.compute_progress([]) == 0

    def test_one_of_six(self):
        assert roadmap_service.compute_progress(_milestones(True, *[False] * 5)) == 17

    def test_all_done(self):
        assert roadmap_service.compute_progress(_milestones(*[True] * 6)) == 100

    def test_none_done(self):
        assert roadmap_service.compute_progress(_milestones(*[False] * 6)) == 0

    def test_half_rounds_up(self):
        assert roadmap_service.compute_progress(_milestones(True, *[False] * 7)) == 13
        assert roadmap_service.compute_progress(_milestones(True, True, True, False)) == 75


async def _goal(goals: GoalStore, target_role: str = "Senior Data Scientist") -> CareerGoal:
    return await goal_service.create_goal(
        goals, owner_id=OWNER, title="Next role", target_role=target_role
    )


async def _roadmap(roadmaps: RoadmapStore, goals: GoalStore, goal: CareerGoal) -> Roadmap:
    return await roadmap_service.get_or_create_roadmap(
        roadmaps, goals, user_id=OWNER, goal_id=goal.id
    )


@pytest.mark.asyncio
async def test_first_view_generates_and_stores_roadmap(
    goals: GoalStore, roadmaps: RoadmapStore
) -> None:
    goal = await _goal(goals)

    roadmap = await _roadmap(roadmaps, goals, goal)

    assert roadmap.title == "Roadmap for Next role"
    assert roadmap.status == "active"
    assert roadmap.career_goal_id == goal.id
    assert len(roadmap.milestones) == 6
    assert roadmap.milestones[0]["title"] == "Learn Python Fundamentals"
    assert roadmap.milestones[0]["category"] == "skill"
    assert await roadmaps.select(goal.id, OWNER) is roadmap


@pytest.mark.asyncio
async def test_second_view_returns_stored_roadmap(goals: GoalStore, roadmaps: RoadmapStore) -> None:
    goal = await _goal(goals)
    first = await _roadmap(roadmaps, goals, goal)
    await roadmap_service.toggle_milestone(
        roadmaps, user_id=OWNER, goal_id=goal.id, milestone_id="3"
    )
    # Editing the goal does not regenerate an existing roadmap
    await goal_service.update_goal(
        goals, goal_id=goal.id, owner_id=OWNER, target_role="Product Manager"
    )

    second = await _roadmap(roadmaps, goals, goal)

    assert second.id == first.id
    assert second.milestones[0]["title"] == "Learn Python Fundamentals"
    assert second.milestones[2]["completed"] is True


@pytest.mark.asyncio
async def test_insert_if_absent_keeps_a_single_row(
    goals: GoalStore, roadmaps: RoadmapStore
) -> None:
    """Two first views that both missed the read converge on one roadmap."""
    goal = await _goal(goals)
    values = {
        "id": "roadmap-1",
        "user_id": OWNER,
        "career_goal_id": goal.id,
        "title": "First",
        "milestones": [],
        "status": "active",
    }

    assert await roadmaps.insert_if_absent(values) is True
    second = {**values, "id": "roadmap-2", "title": "Second"}
    assert await roadmaps.insert_if_absent(second) is False

    roadmap = await _roadmap(roadmaps, goals, goal)
    assert roadmap.id == "roadmap-1"
    assert roadmap.title == "First"


@pytest.mark.asyncio
async def test_roadmap_for_other_owners_goal(goals: GoalStore, roadmaps: RoadmapStore) -> None:
    goal = await _goal(goals)
    with pytest.raises(NotFoundError):
        await roadmap_service.get_or_create_roadmap(
            roadmaps, goals, user_id=OTHER, goal_id=goal.id
        )
    assert await roadmaps.select(goal.id, OTHER) is None


@pytest.mark.asyncio
async def test_toggle_is_an_involution(goals: GoalStore, roadmaps: RoadmapStore) -> None:
    goal = await _goal(goals)
    await _roadmap(roadmaps, goals, goal)

    once = await roadmap_service.toggle_milestone(
        roadmaps, user_id=OWNER, goal_id=goal.id, milestone_id="2"
    )
    assert once.milestones[1]["completed"] is True
    assert roadmap_service.get_roadmap_progress(once)["progress"] == 33

    twice = await roadmap_service.toggle_milestone(
        roadmaps, user_id=OWNER, goal_id=goal.id, milestone_id="2"
    )
    assert twice.milestones[1]["completed"] is False
    assert roadmap_service.get_roadmap_progress(twice)["progress"] == 17


@pytest.mark.asyncio
async def test_toggle_can_uncomplete_seed_milestone(
    goals: GoalStore, roadmaps: RoadmapStore
) -> None:
    goal = await _goal(goals)
    await _roadmap(roadmaps, goals, goal)

    roadmap = await roadmap_service.toggle_milestone(
        roadmaps, user_id=OWNER, goal_id=goal.id, milestone_id="1"
    )

    assert [m["completed"] for m in roadmap.milestones] == [False] * 6
    assert roadmap_service.get_roadmap_progress(roadmap)["progress"] == 0


@pytest.mark.asyncio
async def test_toggle_unknown_milestone(goals: GoalStore, roadmaps: RoadmapStore) -> None:
    goal = await _goal(goals)
    await _roadmap(roadmaps, goals, goal)

    with pytest.raises(NotFoundError, match="Milestone 42"):
        await roadmap_service.toggle_milestone(
            roadmaps, user_id=OWNER, goal_id=goal.id, milestone_id="42"
        )


@pytest.mark.asyncio
async def test_toggle_without_roadmap(goals: GoalStore, roadmaps: RoadmapStore) -> None:
    goal = await _goal(goals)
    with pytest.raises(NotFoundError):
        await roadmap_service.toggle_milestone(
            roadmaps, user_id=OWNER, goal_id=goal.id, milestone_id="1"
        )


@pytest.mark.asyncio
async def test_goal_status_does_not_touch_roadmap(goals: GoalStore, roadmaps: RoadmapStore) -> None:
    goal = await _goal(goals)
    await _roadmap(roadmaps, goals, goal)

    await goal_service.set_status(goals, goal_id=goal.id, owner_id=OWNER, status="completed")

    roadmap = await roadmaps.select(goal.id, OWNER)
    assert roadmap.status == "active"


@pytest.mark.asyncio
async def test_roadmap_progress_read_model(goals: GoalStore, roadmaps: RoadmapStore) -> None:
    goal = await _goal(goals, target_role="Blockchain Architect")
    roadmap = await _roadmap(roadmaps, goals, goal)

    progress = roadmap_service.get_roadmap_progress(roadmap)

    assert progress["roadmap_id"] == roadmap.id
    assert progress["progress"] == 17
    assert progress["completed_count"] == 1
    assert progress["total_count"] == 6
    assert progress["milestones"][1].description == (
        "Obtain industry-recognized certification relevant to Blockchain Architect"
    )


@pytest.mark.asyncio
async def test_corrupt_milestones_become_store_error(
    goals: GoalStore, roadmaps: RoadmapStore
) -> None:
    """A milestone list edited outside the service fails as a store error."""
    goal = await _goal(goals)
    await roadmaps.insert_if_absent(
        {
            "id": "roadmap-1",
            "user_id": OWNER,
            "career_goal_id": goal.id,
            "title": "Edited by hand",
            "milestones": [{"id": "1", "category": "hobby"}],
            "status": "active",
        }
    )
    roadmap = await roadmaps.select(goal.id, OWNER)

    with pytest.raises(StoreError, match="roadmaps.decode"):
        roadmap_service.get_roadmap_progress(roadmap)
