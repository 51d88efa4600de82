## Insight refresh jobs
"""
Scheduled industry-insight refresh.

Celery beat fires `insights.refresh_all` weekly. Each stored industry is
regenerated through the same structured-generation path used by the lazy
user-facing fetch, and its record is replaced wholesale.

The *_sync helpers take an explicit session + generator so they can run
outside a worker (tests, one-off scripts).
"""
import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from app.agents.llm.client import get_llm_client
from app.agents.structured import StructuredGenerationClient
from app.db.models.industry_insight import IndustryInsight
from app.db.session import SessionLocal
from app.errors import PersistenceFailure
from app.insights.service import refresh_insight
from app.jobs.celery_app import celery_app
from app.settings import settings

logger = logging.getLogger(__name__)


def _generator() -> StructuredGenerationClient:
    return StructuredGenerationClient(get_llm_client(), temperature=settings.LLM_TEMPERATURE)


def refresh_industry_insight_sync(db: Session, generator: StructuredGenerationClient, industry: str) -> Dict[str, Any]:
    row = refresh_insight(db, generator, industry)
    return {"ok": True, "industry": row.industry, "next_update": row.next_update.isoformat()}


def refresh_all_industry_insights_sync(db: Session, generator: StructuredGenerationClient) -> Dict[str, Any]:
    industries = [
        industry
        for (industry,) in db.query(IndustryInsight.industry).order_by(IndustryInsight.industry.asc()).all()
    ]
    logger.info("Refreshing insights for %d industries", len(industries))

    refreshed = 0
    failed: list[str] = []
    for industry in industries:
        try:
            refresh_insight(db, generator, industry)
            refreshed += 1
        except PersistenceFailure:
            # Already logged with traceback; keep going with the rest
            failed.append(industry)

    logger.info("Insight refresh done (refreshed=%d, failed=%d)", refreshed, len(failed))
    return {"ok": not failed, "refreshed": refreshed, "failed": failed}


@celery_app.task(name="insights.refresh_one")
def refresh_industry_insight(industry: str) -> Dict[str, Any]:
    db = SessionLocal()
    try:
        return refresh_industry_insight_sync(db, _generator(), industry)
    finally:
        db.close()


@celery_app.task(name="insights.refresh_all")
def refresh_all_industry_insights() -> Dict[str, Any]:
    db = SessionLocal()
    try:
        return refresh_all_industry_insights_sync(db, _generator())
    finally:
        db.close()
