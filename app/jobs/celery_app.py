## Celery Configuration
#
# Worker:  celery -A app.jobs.celery_app worker --loglevel=info
# Beat:    celery -A app.jobs.celery_app beat
from celery import Celery
from celery.schedules import crontab
from celery.signals import setup_logging

from app.logging_config import configure_logging
from app.settings import settings

celery_app = Celery(
    "career_coach",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["app.jobs.tasks"],
)

celery_app.conf.update(
    task_track_started=True,
    task_serializer='json',
    result_serializer='json',
    accept_content=['json'],
    timezone="UTC",
    beat_schedule={
        # Weekly, Sunday 00:00 UTC
        "refresh-industry-insights": {
            "task": "insights.refresh_all",
            "schedule": crontab(minute=0, hour=0, day_of_week="sun"),
        },
    },
)


@setup_logging.connect
def _configure_worker_logging(**kwargs):
    configure_logging()
