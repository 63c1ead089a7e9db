"""Roadmap store."""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite

from careerpath.core.exceptions import StoreError
from careerpath.models.roadmap import Roadmap
from careerpath.stores.base import BaseStore

# Dialects with INSERT ... ON CONFLICT DO NOTHING
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class RoadmapStore(BaseStore):
    async def select(self, goal_id: str, owner_id: str) -> Roadmap | None:
        """The roadmap for one (user, goal) pair, or None."""
        stmt = (
            select(Roadmap)
            .where(Roadmap.career_goal_id == goal_id, Roadmap.user_id == owner_id)
            .order_by(Roadmap.created_at.asc())
            .limit(1)
        )
        with self.translate_errors("roadmaps.select"):
            result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def insert_if_absent(self, values: dict[str, Any]) -> bool:
        """Insert a roadmap row unless one exists for its (user, goal) pair.

        Concurrent first views race on the unique (user_id, career_goal_id)
        constraint; the loser's insert is a no-op.

        Returns:
            True if this call inserted the row.
        """
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise StoreError("roadmaps.insert", f"dialect '{dialect}' has no upsert support")

        stmt = (
            insert(Roadmap.__table__)
            .values(**values)
            .on_conflict_do_nothing(index_elements=["user_id", "career_goal_id"])
        )
        with self.translate_errors("roadmaps.insert"):
            result = await self.db.execute(stmt)
        return bool(result.rowcount)

    async def update(
        self, goal_id: str, owner_id: str, fields: dict[str, Any]
    ) -> Roadmap | None:
        roadmap = await self.select(goal_id, owner_id)
        if roadmap is None:
            return None

        with self.translate_errors("roadmaps.update"):
            for name, value in fields.items():
                setattr(roadmap, name, value)
            await self.db.flush()
        return roadmap

    async def delete(self, goal_id: str, owner_id: str) -> int:
        """Delete every roadmap row for the pair; returns the number removed."""
        stmt = delete(Roadmap).where(
            Roadmap.career_goal_id == goal_id,
            Roadmap.user_id == owner_id,
        )
        with self.translate_errors("roadmaps.delete"):
            result = await self.db.execute(stmt)
        return result.rowcount or 0
