import json

from app.db.models import IndustryInsight

from conftest import INSIGHT


def test_onboarding_status_before_and_after(auth_client, llm):
    assert auth_client.get("/api/profile/onboarding-status").json() == {"is_onboarded": False}

    llm.responses.append(json.dumps(INSIGHT))
    auth_client.put("/api/profile", json={"industry": "tech"})

    assert auth_client.get("/api/profile/onboarding-status").json() == {"is_onboarded": True}


def test_update_profile_creates_industry_insight(auth_client, db, llm):
    llm.responses.append(json.dumps(INSIGHT))

    resp = auth_client.put("/api/profile", json={
        "industry": "  software   engineering ",
        "experience": 5,
        "bio": " Builder of things ",
        "skills": ["Python", " ", "Go "],
    })

    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["industry"] == "software engineering"
    assert user["experience"] == 5
    assert user["bio"] == "Builder of things"
    assert user["skills"] == ["Python", "Go"]
    row = db.query(IndustryInsight).filter(IndustryInsight.industry == "software engineering").one()
    assert row.growth_rate == 12.5


def test_update_profile_reuses_existing_insight(auth_client, db, llm):
    llm.responses.append(json.dumps(INSIGHT))
    auth_client.put("/api/profile", json={"industry": "tech"})
    auth_client.put("/api/profile", json={"bio": "updated"})

    assert len(llm.calls) == 1
    assert db.query(IndustryInsight).count() == 1


def test_update_profile_validates_experience(auth_client):
    resp = auth_client.put("/api/profile", json={"experience": -1})

    assert resp.status_code == 422
