import calendar
from datetime import datetime

from blu_networking.core.timeutils import tz

LEAD_BODY = {"name": "Pat", "company": "Prospect LLC", "type": "Referral", "status": "Initial Contact", "value": 1000}


def _seed_leads(client):
    client.post("/api/leads", json=LEAD_BODY)
    client.post("/api/leads", json={**LEAD_BODY, "name": "Sam", "status": "Converted", "value": 2000})


def test_analytics_stats(client, make_user, login):
    make_user("alice")
    login("alice")
    _seed_leads(client)

    stats = client.get("/api/analytics/stats", params={"period": "monthly"}).json()
    assert stats["totalLeads"] == 2
    assert stats["leadChange"] == 100
    assert stats["conversionRate"] == 50
    assert stats["conversionRateChange"] == 50
    assert stats["eventsAttended"] == 0
    assert stats["connections"] == 0
    assert stats["connectionsChange"] == 0


def test_empty_analytics_are_zero(client, make_user, login):
    make_user("alice")
    login("alice")

    stats = client.get("/api/analytics/stats").json()
    assert stats["totalLeads"] == 0
    assert stats["conversionRate"] == 0
    assert stats["leadChange"] == 0


def test_invalid_period_is_rejected(client, make_user, login):
    make_user("alice")
    login("alice")

    response = client.get("/api/analytics/stats", params={"period": "weekly"})
    assert response.status_code == 400


def test_lead_breakdowns(client, make_user, login):
    make_user("alice")
    login("alice")
    _seed_leads(client)

    types = client.get("/api/analytics/lead-types", params={"period": "quarterly"}).json()
    assert types == [{"name": "Referral", "value": 2}]

    statuses = {row["name"]: row["value"] for row in client.get("/api/analytics/lead-statuses").json()}
    assert statuses == {"Initial Contact": 1, "Converted": 1}


def test_trends_cover_six_months(client, make_user, login):
    make_user("alice")
    login("alice")
    _seed_leads(client)

    trends = client.get("/api/analytics/trends").json()
    assert len(trends) == 6
    assert trends[-1]["month"] == calendar.month_abbr[datetime.now(tz).month]
    assert trends[-1]["leads"] == 2
    assert sum(point["leads"] for point in trends[:-1]) == 0


def test_top_members_ranked_by_value(client, make_user, login):
    make_user("alice")
    make_user("bob")
    login("alice")
    _seed_leads(client)
    login("bob")
    client.post("/api/leads", json={**LEAD_BODY, "value": 500})

    top = client.get("/api/analytics/top-members", params={"period": "yearly"}).json()
    assert [row["name"] for row in top] == ["Alice", "Bob"]
    assert top[0]["leadsGenerated"] == 2
    assert top[0]["leadValue"] == 3000
