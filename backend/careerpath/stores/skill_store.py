"""Skill store."""

from sqlalchemy import select

from careerpath.models.skill import Skill
from careerpath.stores.base import BaseStore


class SkillStore(BaseStore):
    async def select(self, owner_id: str) -> list[Skill]:
        stmt = select(Skill).where(Skill.user_id == owner_id).order_by(Skill.name)
        with self.translate_errors("skills.select"):
            result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def insert(self, skill: Skill) -> Skill:
        with self.translate_errors("skills.insert"):
            self.db.add(skill)
            await self.db.flush()
        return skill

    async def delete(self, skill_id: str, owner_id: str) -> bool:
        stmt = select(Skill).where(Skill.id == skill_id, Skill.user_id == owner_id)
        with self.translate_errors("skills.delete"):
            skill = (await self.db.execute(stmt)).scalar_one_or_none()
            if skill is None:
                return False
            await self.db.delete(skill)
            await self.db.flush()
        return True
