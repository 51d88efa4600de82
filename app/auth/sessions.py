## Session management utilities

import hashlib
import secrets
from datetime import datetime, timedelta, timezone

from app.settings import settings

SESSION_COOKIE_NAME = "cc_session"

def new_raw_token() -> str:
    return secrets.token_urlsafe(32)

def hash_token(raw: str) -> str:
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()

def absolute_expiry(now: datetime | None = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now + timedelta(days=settings.session_absolute_days)
