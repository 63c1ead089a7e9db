"""User profile model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from careerpath.core.database import Base, utc_now


class User(Base):
    """Profile row for a user of the external identity provider."""

    __tablename__ = "users"

    # Identity-provider user id, not generated here
    id: Mapped[str] = mapped_column(String, primary_key=True)
    full_name: Mapped[str | None] = mapped_column(String(100))
    bio: Mapped[str | None] = mapped_column(Text)
    job_title: Mapped[str | None] = mapped_column(String(100))
    experience_years: Mapped[float | None] = mapped_column(Float)
    education_level: Mapped[str | None] = mapped_column(String(100))

    # Metadata
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
