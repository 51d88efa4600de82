## Shared FastAPI dependencies
from typing import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.agents.llm.base import LLMClient
from app.agents.llm.client import get_llm_client
from app.agents.structured import StructuredGenerationClient
from app.db.session import SessionLocal
from app.settings import settings


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_llm() -> LLMClient:
    return get_llm_client()


def get_generator(llm: LLMClient = Depends(get_llm)) -> StructuredGenerationClient:
    return StructuredGenerationClient(llm, temperature=settings.LLM_TEMPERATURE)
