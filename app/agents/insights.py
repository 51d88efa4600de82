## Industry insight generation
from app.agents.schemas import IndustryInsightPayload, SalaryRange
from app.agents.structured import GenerationResult, StructuredGenerationClient


def build_insight_prompt(industry: str) -> str:
    return f"""
Analyze the current state of the {industry} industry.

Output must be STRICT JSON matching this schema:
{{
  "salaryRanges": [
    {{"role": "string", "min": 0, "max": 0, "median": 0, "location": "string"}}
  ],
  "growthRate": 0.0,
  "demandLevel": "High" | "Medium" | "Low",
  "topSkills": ["skill1", "skill2"],
  "marketOutlook": "Positive" | "Neutral" | "Negative",
  "keyTrends": ["trend1", "trend2"],
  "recommendedSkills": ["skill1", "skill2"]
}}

Rules:
- Return ONLY the JSON. No additional text, notes, or markdown formatting.
- Include at least 5 common roles in "salaryRanges".
- "growthRate" is a percentage.
- Include at least 5 items in "topSkills", "keyTrends" and "recommendedSkills".
""".strip()


FALLBACK_INSIGHT = IndustryInsightPayload(
    salary_ranges=[
        SalaryRange(role="Entry Level", min=40000, max=60000, median=50000, location="Remote"),
        SalaryRange(role="Mid Level", min=60000, max=90000, median=75000, location="Remote"),
        SalaryRange(role="Senior Level", min=90000, max=130000, median=110000, location="Remote"),
        SalaryRange(role="Manager", min=100000, max=150000, median=125000, location="Remote"),
        SalaryRange(role="Director", min=130000, max=200000, median=165000, location="Remote"),
    ],
    growth_rate=5.0,
    demand_level="Medium",
    top_skills=[f"Skill {i}" for i in range(1, 6)],
    market_outlook="Neutral",
    key_trends=[f"Trend {i}" for i in range(1, 6)],
    recommended_skills=[f"Recommended {i}" for i in range(1, 6)],
)


def _is_usable(insight: IndustryInsightPayload) -> bool:
    lists = (insight.top_skills, insight.key_trends, insight.recommended_skills)
    if any(not item.strip() for items in lists for item in items):
        return False
    return all(r.min <= r.max for r in insight.salary_ranges)


def generate_industry_insight(generator: StructuredGenerationClient, industry: str) -> GenerationResult[IndustryInsightPayload]:
    return generator.generate(
        build_insight_prompt(industry),
        schema=IndustryInsightPayload,
        default=FALLBACK_INSIGHT,
        validate=_is_usable,
    )
