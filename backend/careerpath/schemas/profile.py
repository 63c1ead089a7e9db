"""User profile schemas."""

from datetime import datetime

from pydantic import BaseModel


class ProfileCreate(BaseModel):
    """Profile created right after sign-up."""

    full_name: str


class ProfileUpdate(BaseModel):
    full_name: str | None = None
    bio: str | None = None
    job_title: str | None = None
    experience_years: float | None = None
    education_level: str | None = None


class ProfileResponse(BaseModel):
    id: str
    full_name: str | None
    bio: str | None
    job_title: str | None
    experience_years: float | None
    education_level: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
