"""Career goal model."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from careerpath.core.database import Base, utc_now


class CareerGoal(Base):
    """A target role the user is working toward."""

    __tablename__ = "career_goals"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)

    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text)
    target_role: Mapped[str] = mapped_column(String(100))
    timeline_months: Mapped[int | None] = mapped_column(Integer)

    # in_progress | completed | on_hold | abandoned
    status: Mapped[str] = mapped_column(String, default="in_progress")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
