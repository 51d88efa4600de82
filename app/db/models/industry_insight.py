## Per-industry insight report, shared by every user in that industry
import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class IndustryInsight(Base):
    __tablename__ = "industry_insights"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    industry: Mapped[str] = mapped_column(String(200), unique=True, index=True, nullable=False)

    salary_ranges: Mapped[list[dict]] = mapped_column(JSON, nullable=False)  # [{role, min, max, median, location}]
    growth_rate: Mapped[float] = mapped_column(Float, nullable=False)
    demand_level: Mapped[str] = mapped_column(String(10), nullable=False)  # High/Medium/Low
    top_skills: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    market_outlook: Mapped[str] = mapped_column(String(10), nullable=False)  # Positive/Neutral/Negative
    key_trends: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    recommended_skills: Mapped[list[str]] = mapped_column(JSON, nullable=False)

    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    next_update: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
