"""Skill service for the user's skill inventory."""

from careerpath.core.database import utc_now
from careerpath.core.exceptions import NotFoundError
from careerpath.core.logging import get_logger
from careerpath.models.skill import Skill
from careerpath.services.validation import require_range, require_text
from careerpath.stores.skill_store import SkillStore

logger = get_logger(__name__)

NAME_MAX_LENGTH = 100
MAX_YEARS_EXPERIENCE = 50


async def list_skills(skills: SkillStore, *, owner_id: str) -> list[Skill]:
    """List the owner's skills ordered by name."""
    return await skills.select(owner_id)


async def add_skill(
    skills: SkillStore,
    *,
    owner_id: str,
    name: str,
    proficiency_level: int,
    years_experience: float = 0,
) -> Skill:
    """Record a skill; proficiency is 1-5, experience 0-50 years (fractions allowed)."""
    now = utc_now()
    skill = Skill(
        user_id=owner_id,
        name=require_text(name, "name", max_length=NAME_MAX_LENGTH),
        proficiency_level=int(
            require_range(
                proficiency_level, "proficiency_level", minimum=1, maximum=5, integer=True
            )
        ),
        years_experience=float(
            require_range(
                years_experience, "years_experience", minimum=0, maximum=MAX_YEARS_EXPERIENCE
            )
        ),
        last_used_at=now,
        created_at=now,
        updated_at=now,
    )
    await skills.insert(skill)

    logger.info("Skill added", skill_id=skill.id, name=skill.name)
    return skill


async def delete_skill(skills: SkillStore, *, skill_id: str, owner_id: str) -> None:
    if not await skills.delete(skill_id, owner_id):
        raise NotFoundError("Skill", skill_id)
    logger.info("Skill deleted", skill_id=skill_id)
