"""Market insights and the skill gap view built on them.

Insight rows are entered by hand; nothing here fetches or infers market
data. The gap is a plain set difference between the skills the market rows
ask for and the skills the user has recorded.
"""

from typing import Any

from careerpath.core.logging import get_logger
from careerpath.models.market_insight import MarketInsight
from careerpath.services import goal_service
from careerpath.stores.goal_store import GoalStore
from careerpath.stores.market_insight_store import MarketInsightStore
from careerpath.stores.skill_store import SkillStore

logger = get_logger(__name__)


async def list_insights(
    insights: MarketInsightStore,
    *,
    role: str | None = None,
    limit: int | None = None,
) -> list[MarketInsight]:
    """List insights, optionally those whose role title contains ``role``."""
    return await insights.select(role=role.strip() if role else None, limit=limit)


def find_missing_skills(skill_names: list[str], insights: list[MarketInsight]) -> list[str]:
    """Required skills from ``insights`` that none of ``skill_names`` covers.

    Comparison ignores case and surrounding whitespace; the result keeps the
    spelling of the first insight that lists the skill and is sorted.
    """
    have = {name.strip().lower() for name in skill_names}
    missing: dict[str, str] = {}
    for insight in insights:
        for required in insight.required_skills or []:
            key = required.strip().lower()
            if key and key not in have:
                missing.setdefault(key, required.strip())
    return sorted(missing.values(), key=str.lower)


async def get_skill_gap(
    skills: SkillStore,
    goals: GoalStore,
    insights: MarketInsightStore,
    *,
    user_id: str,
    goal_id: str,
    limit: int,
) -> dict[str, Any]:
    goal = await goal_service.get_goal(goals, goal_id=goal_id, owner_id=user_id)
    current_skills = await skills.select(user_id)
    market_insights = await insights.select(role=goal.target_role, limit=limit)
    missing = find_missing_skills([s.name for s in current_skills], market_insights)

    logger.info(
        "Skill gap computed",
        goal_id=goal_id,
        insight_count=len(market_insights),
        missing_count=len(missing),
    )
    return {
        "goal_id": goal.id,
        "target_role": goal.target_role,
        "current_skills": current_skills,
        "market_insights": market_insights,
        "missing_skills": missing,
    }
