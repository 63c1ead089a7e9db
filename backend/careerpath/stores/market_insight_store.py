"""Market insight store (read-only)."""

from sqlalchemy import select

from careerpath.models.market_insight import MarketInsight
from careerpath.stores.base import BaseStore


class MarketInsightStore(BaseStore):
    async def select(
        self, role: str | None = None, limit: int | None = None
    ) -> list[MarketInsight]:
        """Insights whose role title contains ``role`` (case-insensitive), newest first."""
        stmt = select(MarketInsight)
        if role:
            stmt = stmt.where(MarketInsight.role_title.ilike(f"%{role}%"))
        stmt = stmt.order_by(MarketInsight.scraped_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)

        with self.translate_errors("market_insights.select"):
            result = await self.db.execute(stmt)
        return list(result.scalars().all())
