## Identity dependencies
#
# get_optional_user treats "no identity" as a normal outcome (None);
# get_current_user turns it into NotAuthenticated.
from datetime import datetime, timezone, timedelta
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.deps import get_db
from app.db.models.session_token import SessionToken
from app.db.models.user import User
from app.auth.sessions import SESSION_COOKIE_NAME, hash_token
from app.db.persist import as_utc, commit_or_raise
from app.errors import NotAuthenticated
from app.settings import settings

def resolve_user(request: Request, db: Session) -> User | None:
    raw = request.cookies.get(SESSION_COOKIE_NAME)
    if not raw:
        return None

    h = hash_token(raw)
    tok = (
        db.query(SessionToken)
        .filter(SessionToken.token_hash == h,
        SessionToken.revoked_at.is_(None))
        .first()
    )

    if not tok:
        return None

    now = datetime.now(timezone.utc)
    # Absolute expiry
    if as_utc(tok.expires_at) <= now:
        return None

    # Idle timeout (server-side)
    idle_deadline = as_utc(tok.last_seen_at) + timedelta(minutes=settings.session_idle_minutes)
    if idle_deadline <= now:
        # Revoke server-side so the token can't be reused
        tok.revoked_at = now
        commit_or_raise(db, "Failed to revoke session")
        return None

    # Update activity
    tok.last_seen_at = now
    commit_or_raise(db, "Failed to update session")

    user = db.query(User).filter(User.id == tok.user_id).first()
    if not user or not user.is_active:
        return None
    return user

def get_optional_user(request: Request, db: Session = Depends(get_db)) -> User | None:
    return resolve_user(request, db)

def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    if user is None:
        raise NotAuthenticated()
    return user
