"""Market insight and skill gap schemas."""

from datetime import datetime

from pydantic import BaseModel

from careerpath.schemas.skill import SkillResponse


class MarketInsightResponse(BaseModel):
    id: str
    role_title: str
    company_name: str | None
    salary_range: dict | None  # {min, max, currency}
    required_skills: list[str]
    location: str | None
    job_posting_url: str | None
    source: str
    scraped_at: datetime

    class Config:
        from_attributes = True


class SkillGapResponse(BaseModel):
    """Current skills set against what the market asks for the target role."""

    goal_id: str
    target_role: str
    current_skills: list[SkillResponse]
    market_insights: list[MarketInsightResponse]
    missing_skills: list[str]
