"""Market insight model (job-market rows entered by hand)."""

import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from careerpath.core.database import Base, utc_now


class MarketInsight(Base):
    __tablename__ = "market_insights"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    role_title: Mapped[str] = mapped_column(String(200), index=True)
    company_name: Mapped[str | None] = mapped_column(String(200))
    salary_range: Mapped[dict | None] = mapped_column(JSON)  # {min, max, currency}
    required_skills: Mapped[list[str]] = mapped_column(JSON, default=list)
    location: Mapped[str | None] = mapped_column(String(200))
    job_posting_url: Mapped[str | None] = mapped_column(String)
    source: Mapped[str] = mapped_column(String(100))

    scraped_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
