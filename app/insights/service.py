## Industry insight persistence
"""
Industry insights: one shared report per industry.

Created lazily the first time any user in that industry asks for it, then
only ever replaced wholesale by the scheduled refresh (app.jobs.tasks).
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.agents.insights import generate_industry_insight
from app.agents.schemas import IndustryInsightPayload
from app.agents.structured import StructuredGenerationClient
from app.db.models.industry_insight import IndustryInsight
from app.db.persist import as_utc, commit_or_raise
from app.errors import PersistenceFailure
from app.settings import settings

logger = logging.getLogger(__name__)


def next_update_at(now: datetime) -> datetime:
    return now + timedelta(days=settings.insight_refresh_days)


def _apply(row: IndustryInsight, payload: IndustryInsightPayload, now: datetime) -> None:
    data = payload.model_dump()
    row.salary_ranges = data["salary_ranges"]
    row.growth_rate = data["growth_rate"]
    row.demand_level = data["demand_level"]
    row.top_skills = data["top_skills"]
    row.market_outlook = data["market_outlook"]
    row.key_trends = data["key_trends"]
    row.recommended_skills = data["recommended_skills"]
    row.last_updated = now
    row.next_update = next_update_at(now)


def _generate(generator: StructuredGenerationClient, industry: str) -> IndustryInsightPayload:
    result = generate_industry_insight(generator, industry)
    if result.is_fallback:
        logger.warning("Using fallback insights for industry=%r (%s)", industry, result.error)
    else:
        logger.info("Generated insights for industry=%r", industry)
    return result.value


def find_insight(db: Session, industry: str) -> IndustryInsight | None:
    return db.query(IndustryInsight).filter(IndustryInsight.industry == industry).first()


def get_or_create_insight(
    db: Session,
    generator: StructuredGenerationClient,
    industry: str,
    *,
    now: datetime | None = None,
) -> IndustryInsight:
    existing = find_insight(db, industry)
    if existing:
        return existing

    now = now or datetime.now(timezone.utc)
    payload = _generate(generator, industry)

    row = IndustryInsight(industry=industry)
    _apply(row, payload, now)
    db.add(row)
    try:
        db.commit()
    except IntegrityError as e:
        # Another request created it between our read and write
        db.rollback()
        existing = find_insight(db, industry)
        if existing:
            return existing
        logger.exception("Failed to create insights for industry=%r", industry)
        raise PersistenceFailure("Failed to save industry insights") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to create insights for industry=%r", industry)
        raise PersistenceFailure("Failed to save industry insights") from e
    return row


def refresh_insight(
    db: Session,
    generator: StructuredGenerationClient,
    industry: str,
    *,
    now: datetime | None = None,
) -> IndustryInsight:
    """Regenerate and fully replace the stored record (upsert by industry)."""
    now = now or datetime.now(timezone.utc)
    payload = _generate(generator, industry)

    row = find_insight(db, industry)
    if row is None:
        row = IndustryInsight(industry=industry)
        db.add(row)
    _apply(row, payload, now)
    commit_or_raise(db, f"Failed to save insights for {industry}")
    return row


def serialize_insight(row: IndustryInsight) -> Dict[str, Any]:
    return {
        "id": str(row.id),
        "industry": row.industry,
        "salary_ranges": row.salary_ranges,
        "growth_rate": row.growth_rate,
        "demand_level": row.demand_level,
        "top_skills": row.top_skills,
        "market_outlook": row.market_outlook,
        "key_trends": row.key_trends,
        "recommended_skills": row.recommended_skills,
        "last_updated": as_utc(row.last_updated).isoformat(),
        "next_update": as_utc(row.next_update).isoformat(),
    }
