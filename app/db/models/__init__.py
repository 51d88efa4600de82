from app.db.models.assessment import Assessment
from app.db.models.industry_insight import IndustryInsight
from app.db.models.resume import Resume
from app.db.models.session_token import SessionToken
from app.db.models.user import User

__all__ = ["Assessment", "IndustryInsight", "Resume", "SessionToken", "User"]
