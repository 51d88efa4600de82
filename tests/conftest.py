import json
import os
from datetime import datetime, timezone

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LLM_PROVIDER", "ollama")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.agents.llm.base import LLMClient
from app.agents.structured import StructuredGenerationClient
from app.auth.hashing import hash_password
from app.auth.sessions import SESSION_COOKIE_NAME, absolute_expiry, hash_token, new_raw_token
from app.db.base import Base
from app.db.models import SessionToken, User
from app.deps import get_db, get_llm
from app.main import app


class FakeLLM(LLMClient):
    """Scripted LLM: pops one response per call, or raises `error` if set."""

    def __init__(self):
        self.responses = []
        self.error = None
        self.calls = []

    def generate_text(self, *, system, user, temperature=0.2):
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


INSIGHT = {
    "salaryRanges": [
        {"role": "Software Engineer", "min": 90000, "max": 150000, "median": 120000, "location": "US"},
        {"role": "Data Scientist", "min": 95000, "max": 160000, "median": 125000, "location": "US"},
        {"role": "DevOps Engineer", "min": 85000, "max": 140000, "median": 110000, "location": "US"},
        {"role": "Product Manager", "min": 100000, "max": 170000, "median": 135000, "location": "US"},
        {"role": "Engineering Manager", "min": 140000, "max": 220000, "median": 180000, "location": "US"},
    ],
    "growthRate": 12.5,
    "demandLevel": "High",
    "topSkills": ["Python", "Cloud", "SQL", "Kubernetes", "TypeScript"],
    "marketOutlook": "Positive",
    "keyTrends": ["AI adoption", "Platform teams", "Remote work", "FinOps", "Security by default"],
    "recommendedSkills": ["LLM tooling", "Terraform", "Rust", "Data engineering", "Observability"],
}


def quiz_json(n=2):
    return json.dumps({
        "questions": [
            {
                "question": f"Question {i}?",
                "options": ["A", "B", "C", "D"],
                "correctAnswer": "B",
                "explanation": f"Because {i}.",
            }
            for i in range(1, n + 1)
        ]
    })


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def generator(llm):
    return StructuredGenerationClient(llm)


@pytest.fixture
def client(db, llm):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_llm] = lambda: llm
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def user(db):
    u = User(
        email="ada@example.com",
        password_hash=hash_password("correct horse"),
        first_name="Ada",
        last_name="Lovelace",
        skills=["Python", "SQL"],
    )
    db.add(u)
    db.commit()
    return u


@pytest.fixture
def auth_client(client, db, user):
    raw = new_raw_token()
    db.add(SessionToken(
        user_id=user.id,
        token_hash=hash_token(raw),
        expires_at=absolute_expiry(),
        last_seen_at=datetime.now(timezone.utc),
    ))
    db.commit()
    client.cookies.set(SESSION_COOKIE_NAME, raw)
    return client
