# Industry insight API
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.agents.structured import StructuredGenerationClient
from app.auth.deps import get_current_user
from app.db.models.user import User
from app.deps import get_db, get_generator
from app.errors import InvalidRequest
from app.insights.service import get_or_create_insight, serialize_insight

router = APIRouter(prefix="/api/insights")

@router.get("")
def get_industry_insights(
    db: Session = Depends(get_db),
    generator: StructuredGenerationClient = Depends(get_generator),
    user: User = Depends(get_current_user),
):
    if not user.industry:
        raise InvalidRequest("User has not set an industry")

    insight = get_or_create_insight(db, generator, user.industry)
    return serialize_insight(insight)
