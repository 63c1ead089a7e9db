"""Tests for skill_service."""

import math

import pytest

from careerpath.core.exceptions import NotFoundError, ValidationError
from careerpath.services import skill_service
from careerpath.stores import SkillStore

OWNER = "user-a"


@pytest.mark.asyncio
async def test_add_and_list_skills(skills: SkillStore) -> None:
    await skill_service.add_skill(skills, owner_id=OWNER, name="SQL", proficiency_level=4)
    added = await skill_service.add_skill(
        skills, owner_id=OWNER, name="  Python ", proficiency_level=5, years_experience=2.5
    )
    await skill_service.add_skill(skills, owner_id="someone-else", name="Go", proficiency_level=3)

    assert added.name == "Python"
    assert added.years_experience == 2.5
    assert added.last_used_at is not None

    listed = await skill_service.list_skills(skills, owner_id=OWNER)
    assert [s.name for s in listed] == ["Python", "SQL"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "proficiency_level": 3},
        {"name": "Rust", "proficiency_level": 0},
        {"name": "Rust", "proficiency_level": 6},
        {"name": "Rust", "proficiency_level": 2.5},
        {"name": "Rust", "proficiency_level": 3, "years_experience": -1},
        {"name": "Rust", "proficiency_level": 3, "years_experience": 51},
        {"name": "Rust", "proficiency_level": math.nan},
        {"name": "Rust", "proficiency_level": 3, "years_experience": math.inf},
    ],
)
async def test_add_skill_rejects_invalid_input(skills: SkillStore, kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        await skill_service.add_skill(skills, owner_id=OWNER, **kwargs)


@pytest.mark.asyncio
async def test_delete_skill(skills: SkillStore) -> None:
    skill = await skill_service.add_skill(skills, owner_id=OWNER, name="SQL", proficiency_level=1)

    with pytest.raises(NotFoundError):
        await skill_service.delete_skill(skills, skill_id=skill.id, owner_id="someone-else")

    await skill_service.delete_skill(skills, skill_id=skill.id, owner_id=OWNER)
    assert await skill_service.list_skills(skills, owner_id=OWNER) == []

    with pytest.raises(NotFoundError):
        await skill_service.delete_skill(skills, skill_id=skill.id, owner_id=OWNER)
