## Pydantic Schemas for Structured Output
#
# Field aliases match the camelCase keys the prompts ask the model for;
# populate_by_name lets our own API accept snake_case too.
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

DemandLevel = Literal["High", "Medium", "Low"]
MarketOutlook = Literal["Positive", "Neutral", "Negative"]


class SalaryRange(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    role: str = Field(min_length=1)
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    median: float = Field(ge=0)
    location: str


class IndustryInsightPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    salary_ranges: List[SalaryRange] = Field(alias="salaryRanges", min_length=5)
    growth_rate: float = Field(alias="growthRate")
    demand_level: DemandLevel = Field(alias="demandLevel")
    top_skills: List[str] = Field(alias="topSkills", min_length=5)
    market_outlook: MarketOutlook = Field(alias="marketOutlook")
    key_trends: List[str] = Field(alias="keyTrends", min_length=5)
    recommended_skills: List[str] = Field(alias="recommendedSkills", min_length=5)


class QuizQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=4, max_length=4)
    correct_answer: str = Field(alias="correctAnswer")
    explanation: str = ""


class QuizPayload(BaseModel):
    questions: List[QuizQuestion] = Field(min_length=1)
