"""Skill schemas."""

from datetime import datetime

from pydantic import BaseModel


class SkillCreate(BaseModel):
    name: str
    proficiency_level: int
    years_experience: float = 0


class SkillResponse(BaseModel):
    id: str
    name: str
    proficiency_level: int
    years_experience: float
    last_used_at: datetime
    created_at: datetime

    class Config:
        from_attributes = True
