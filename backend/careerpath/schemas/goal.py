"""Career goal schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class GoalStatus(str, Enum):
    """Career goal status. Any status may move to any other."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    ABANDONED = "abandoned"


class GoalCreate(BaseModel):
    """Create career goal request."""

    title: str
    target_role: str
    description: str | None = None
    timeline_months: int | None = None


class GoalUpdate(BaseModel):
    """Edit a career goal; only the fields sent are changed."""

    title: str | None = None
    target_role: str | None = None
    description: str | None = None
    timeline_months: int | None = None
    status: str | None = None


class GoalStatusUpdate(BaseModel):
    status: str


class GoalResponse(BaseModel):
    """Career goal response."""

    id: str
    title: str
    description: str | None
    target_role: str
    timeline_months: int | None
    status: GoalStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class GoalSummary(BaseModel):
    """Goal counts per status for the dashboard."""

    total: int
    by_status: dict[GoalStatus, int]
