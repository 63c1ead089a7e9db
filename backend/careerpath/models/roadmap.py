"""Roadmap model for milestone plans attached to career goals."""

import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from careerpath.core.database import Base, utc_now


class Roadmap(Base):
    __tablename__ = "roadmaps"
    __table_args__ = (
        UniqueConstraint("user_id", "career_goal_id", name="uq_roadmaps_user_goal"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    career_goal_id: Mapped[str] = mapped_column(ForeignKey("career_goals.id"))

    title: Mapped[str] = mapped_column(String(200))
    # Stored and rewritten as a whole; never updated per item
    milestones: Mapped[list[dict[str, object]]] = mapped_column(JSON, default=list)
    status: Mapped[str] = mapped_column(String, default="active")  # active | completed | archived

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
