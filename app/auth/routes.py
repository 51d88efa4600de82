# Authentication routes (register/login/logout)
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.deps import get_db
from app.db.models.user import User
from app.db.models.session_token import SessionToken
from app.auth.hashing import hash_password, verify_password
from app.auth.sessions import SESSION_COOKIE_NAME, new_raw_token, hash_token, absolute_expiry
from app.db.persist import commit_or_raise
from app.errors import InvalidRequest, NotAuthenticated, PersistenceFailure
from app.users.service import serialize_user
from app.settings import settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth")


class RegisterRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=8)
    first_name: str = ""
    last_name: str = ""
    image_url: str = ""


class LoginRequest(BaseModel):
    email: str
    password: str


def email_taken(db: Session, email: str) -> bool:
    return db.query(User).filter(User.email == email).first() is not None


@router.post("/register", status_code=201)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    email_norm = body.email.strip().lower()
    if email_taken(db, email_norm):
        raise InvalidRequest("Email already registered")

    user = User(
        email=email_norm,
        password_hash=hash_password(body.password),
        first_name=body.first_name.strip(),
        last_name=body.last_name.strip(),
        image_url=body.image_url.strip(),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise InvalidRequest("Email already registered") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to register user")
        raise PersistenceFailure("Failed to register user") from e
    logger.info("Registered user %s", user.id)
    return {"user": serialize_user(user)}

@router.post("/login")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    email_norm = body.email.strip().lower()
    user = db.query(User).filter(User.email == email_norm).first()
    if not user or not user.is_active or not verify_password(body.password, user.password_hash):
        raise NotAuthenticated("Invalid email or password")

    raw = new_raw_token()
    tok = SessionToken(
        user_id=user.id,
        token_hash=hash_token(raw),
        expires_at=absolute_expiry(),
        last_seen_at=datetime.now(timezone.utc),
    )
    db.add(tok)
    commit_or_raise(db, "Failed to start session")

    resp = JSONResponse({"user": serialize_user(user)})
    # Cookie security flags: httpOnly always; secure=True in prod over HTTPS
    resp.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=raw,
        httponly=True,
        secure=(settings.env == "prod"),
        samesite="lax",
        max_age=60 * 60 * 24 * settings.session_absolute_days,
        path="/",
    )
    return resp

@router.post("/logout")
def logout(request: Request, db: Session = Depends(get_db)):
    raw = request.cookies.get(SESSION_COOKIE_NAME)
    if raw:
        h = hash_token(raw)
        tok = db.query(SessionToken).filter(SessionToken.token_hash == h,
        SessionToken.revoked_at.is_(None)).first()
        if tok:
            tok.revoked_at = datetime.now(timezone.utc)
            commit_or_raise(db, "Failed to end session")

    resp = JSONResponse({"ok": True})
    resp.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return resp
