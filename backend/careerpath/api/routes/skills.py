"""Skill routes."""

from fastapi import APIRouter, status

from careerpath.api.deps import CurrentUser, Skills
from careerpath.models import Skill
from careerpath.schemas import SkillCreate, SkillResponse
from careerpath.services import skill_service

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=list[SkillResponse])
async def list_skills(user_id: CurrentUser, skills: Skills) -> list[Skill]:
    return await skill_service.list_skills(skills, owner_id=user_id)


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def add_skill(data: SkillCreate, user_id: CurrentUser, skills: Skills) -> Skill:
    return await skill_service.add_skill(
        skills,
        owner_id=user_id,
        name=data.name,
        proficiency_level=data.proficiency_level,
        years_experience=data.years_experience,
    )


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_skill(skill_id: str, user_id: CurrentUser, skills: Skills) -> None:
    await skill_service.delete_skill(skills, skill_id=skill_id, owner_id=user_id)
