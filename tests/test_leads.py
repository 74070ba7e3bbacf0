from datetime import timedelta

from blu_networking.core.timeutils import get_current_date
from blu_networking.domain.models.user import UserLevel

LEAD_BODY = {
    "name": "Pat Prospect",
    "company": "Prospect LLC",
    "email": "pat@example.com",
    "type": "Referral",
    "status": "Initial Contact",
    "value": 1500,
}


def test_lead_owner_is_forced_to_caller(client, make_user, login):
    alice = make_user("alice")
    bob = make_user("bob")
    login("alice")

    response = client.post("/api/leads", json={**LEAD_BODY, "userId": bob.id})

    assert response.status_code == 201
    assert response.json()["userId"] == alice.id


def test_leads_are_visible_only_to_owner(client, make_user, login):
    make_user("alice")
    make_user("bob")
    login("alice")
    client.post("/api/leads", json=LEAD_BODY)

    assert len(client.get("/api/leads").json()) == 1

    login("bob")
    assert client.get("/api/leads").json() == []


def test_stats_for_new_member_are_zero(client, make_user, login):
    make_user("alice")
    login("alice")

    assert client.get("/api/stats").json() == {
        "connections": 0,
        "leadsExchanged": 0,
        "eventsAttended": 0,
        "leadValue": 0,
    }


def test_stats_sum_lead_values(client, make_user, login):
    make_user("alice")
    login("alice")
    client.post("/api/leads", json=LEAD_BODY)
    client.post("/api/leads", json={**LEAD_BODY, "name": "No Value", "value": None})

    stats = client.get("/api/stats").json()
    assert stats["leadsExchanged"] == 2
    assert stats["leadValue"] == 1500


def test_admin_stats_average_is_zero_without_leads(client, make_user, login):
    make_user("boardie", level=UserLevel.BOARD_MEMBER)
    login("boardie")

    stats = client.get("/api/admin/stats").json()
    assert stats["totalLeads"] == 0
    assert stats["avgLeadValue"] == 0
    assert stats["totalMembers"] == 2  # superadmin + boardie


def test_goal_lifecycle(client, make_user, login):
    make_user("alice")
    login("alice")
    assert client.get("/api/goals").json() is None

    today = get_current_date()
    response = client.post("/api/goals", json={
        "leadsGoal": 10,
        "eventsGoal": 2,
        "period": "monthly",
        "startDate": (today - timedelta(days=1)).isoformat(),
        "endDate": (today + timedelta(days=29)).isoformat(),
    })
    assert response.status_code == 201

    current = client.get("/api/goals").json()
    assert current["leadsGoal"] == 10
    assert current["leadsAchieved"] == 0


def test_goal_dates_are_validated(client, make_user, login):
    make_user("alice")
    login("alice")

    response = client.post("/api/goals", json={
        "period": "monthly",
        "startDate": "2026-02-01",
        "endDate": "2026-01-01",
    })
    assert response.status_code == 400
