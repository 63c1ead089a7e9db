"""Career goal store."""

from typing import Any

from sqlalchemy import func, select

from careerpath.models.career_goal import CareerGoal
from careerpath.stores.base import BaseStore


class GoalStore(BaseStore):
    async def select(self, owner_id: str, goal_id: str | None = None) -> list[CareerGoal]:
        """Goals owned by ``owner_id``, newest first, optionally narrowed to one id."""
        stmt = select(CareerGoal).where(CareerGoal.user_id == owner_id)
        if goal_id is not None:
            stmt = stmt.where(CareerGoal.id == goal_id)
        stmt = stmt.order_by(CareerGoal.created_at.desc())

        with self.translate_errors("goals.select"):
            result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get(self, goal_id: str, owner_id: str) -> CareerGoal | None:
        goals = await self.select(owner_id, goal_id)
        return goals[0] if goals else None

    async def insert(self, goal: CareerGoal) -> CareerGoal:
        with self.translate_errors("goals.insert"):
            self.db.add(goal)
            await self.db.flush()
        return goal

    async def update(
        self, goal_id: str, owner_id: str, fields: dict[str, Any]
    ) -> CareerGoal | None:
        goal = await self.get(goal_id, owner_id)
        if goal is None:
            return None

        with self.translate_errors("goals.update"):
            for name, value in fields.items():
                setattr(goal, name, value)
            await self.db.flush()
        return goal

    async def delete(self, goal_id: str, owner_id: str) -> bool:
        goal = await self.get(goal_id, owner_id)
        if goal is None:
            return False

        with self.translate_errors("goals.delete"):
            await self.db.delete(goal)
            await self.db.flush()
        return True

    async def count_by_status(self, owner_id: str) -> dict[str, int]:
        stmt = (
            select(CareerGoal.status, func.count(CareerGoal.id))
            .where(CareerGoal.user_id == owner_id)
            .group_by(CareerGoal.status)
        )
        with self.translate_errors("goals.count_by_status"):
            result = await self.db.execute(stmt)
        return {status: count for status, count in result.all()}
