"""Market insight routes."""

from fastapi import APIRouter, Query

from careerpath.api.deps import MarketInsights
from careerpath.models import MarketInsight
from careerpath.schemas import MarketInsightResponse
from careerpath.services import insight_service

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("", response_model=list[MarketInsightResponse])
async def list_insights(
    insights: MarketInsights,
    role: str | None = None,
    limit: int = Query(default=50, ge=1, le=200),
) -> list[MarketInsight]:
    """List market insights, optionally filtered by role title."""
    return await insight_service.list_insights(insights, role=role, limit=limit)
