import json
from datetime import datetime, timedelta, timezone

import httpx

from app.agents.insights import FALLBACK_INSIGHT
from app.db.persist import as_utc
from app.db.models import IndustryInsight
from app.insights.service import get_or_create_insight, refresh_insight, serialize_insight

from conftest import INSIGHT

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def test_first_fetch_generates_and_stores(db, llm, generator):
    llm.responses.append(json.dumps(INSIGHT))

    row = get_or_create_insight(db, generator, "tech", now=NOW)

    assert row.industry == "tech"
    assert len(row.salary_ranges) >= 5
    assert len(row.top_skills) >= 5
    assert len(row.key_trends) >= 5
    assert len(row.recommended_skills) >= 5
    assert row.demand_level == "High"
    assert as_utc(row.next_update) == NOW + timedelta(days=7)
    assert "tech industry" in llm.calls[0]["user"]


def test_network_error_stores_fallback_table(db, llm, generator):
    llm.error = httpx.ConnectError("network down")

    row = get_or_create_insight(db, generator, "tech", now=NOW)

    assert row.salary_ranges == [r.model_dump() for r in FALLBACK_INSIGHT.salary_ranges]
    assert len(row.salary_ranges) == 5
    assert row.growth_rate == 5.0
    assert row.demand_level == "Medium"
    assert row.market_outlook == "Neutral"
    assert row.top_skills == FALLBACK_INSIGHT.top_skills
    assert db.query(IndustryInsight).count() == 1


def test_fetch_twice_generates_once(db, llm, generator):
    llm.responses.append(json.dumps(INSIGHT))

    first = serialize_insight(get_or_create_insight(db, generator, "tech"))
    second = serialize_insight(get_or_create_insight(db, generator, "tech"))

    assert first == second
    assert len(llm.calls) == 1


def test_invalid_salary_range_falls_back(db, llm, generator):
    bad = dict(INSIGHT, salaryRanges=[dict(r, min=r["max"] + 1) for r in INSIGHT["salaryRanges"]])
    llm.responses.append(json.dumps(bad))

    row = get_or_create_insight(db, generator, "finance")

    assert row.growth_rate == FALLBACK_INSIGHT.growth_rate


def test_refresh_replaces_existing_record(db, llm, generator):
    llm.error = httpx.ConnectError("network down")
    original = get_or_create_insight(db, generator, "tech", now=NOW)
    original_id = original.id

    llm.error = None
    llm.responses.append(json.dumps(INSIGHT))
    later = NOW + timedelta(days=7)
    row = refresh_insight(db, generator, "tech", now=later)

    assert row.id == original_id
    assert row.growth_rate == 12.5
    assert row.top_skills == INSIGHT["topSkills"]
    assert as_utc(row.next_update) == later + timedelta(days=7)
    assert db.query(IndustryInsight).count() == 1


def test_route_requires_authentication(client):
    resp = client.get("/api/insights")

    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}


def test_route_requires_industry(auth_client):
    resp = auth_client.get("/api/insights")

    assert resp.status_code == 400
    assert resp.json() == {"error": "User has not set an industry"}


def test_route_returns_users_industry_insights(auth_client, db, user, llm):
    user.industry = "tech"
    db.commit()
    llm.responses.append(f"```json\n{json.dumps(INSIGHT)}\n```")

    resp = auth_client.get("/api/insights")

    assert resp.status_code == 200
    body = resp.json()
    assert body["industry"] == "tech"
    assert body["market_outlook"] == "Positive"
    assert body["salary_ranges"][0]["role"] == "Software Engineer"


def test_infinite_salary_figures_store_fallback(db, llm, generator):
    bad = dict(INSIGHT, salaryRanges=[dict(r, max=float("inf"), median=float("inf")) for r in INSIGHT["salaryRanges"]])
    llm.responses.append(json.dumps(bad))

    row = get_or_create_insight(db, generator, "tech", now=NOW)

    assert row.salary_ranges == [r.model_dump() for r in FALLBACK_INSIGHT.salary_ranges]
    assert row.growth_rate == FALLBACK_INSIGHT.growth_rate


def test_route_serves_fallback_for_nan_growth_rate(auth_client, db, user, llm):
    user.industry = "tech"
    db.commit()
    llm.responses.append(json.dumps(dict(INSIGHT, growthRate=float("nan"))))

    resp = auth_client.get("/api/insights")

    assert resp.status_code == 200
    assert resp.json()["growth_rate"] == 5.0
    assert db.query(IndustryInsight).count() == 1
