from datetime import timedelta

from blu_networking.core.timeutils import get_current_date
from blu_networking.domain.models.user import UserLevel


def _feature(client, user_id, **extra):
    response = client.post("/api/member-spotlights", json={
        "userId": user_id,
        "description": "Connected three members with new clients",
        **extra,
    })
    assert response.status_code == 201, response.text
    return response.json()


def test_no_spotlight_returns_null(client, make_user, login):
    make_user("alice")
    login("alice")

    response = client.get("/api/spotlight")
    assert response.status_code == 200
    assert response.json() is None


def test_member_cannot_create_spotlight(client, make_user, login):
    alice = make_user("alice")
    login("alice")

    response = client.post("/api/member-spotlights", json={"userId": alice.id, "description": "Me!"})
    assert response.status_code == 403


def test_active_spotlight_includes_member(client, make_user, login):
    alice = make_user("alice")
    make_user("boardie", level=UserLevel.BOARD_MEMBER)
    login("boardie")
    _feature(client, alice.id, achievements="Top referrer")

    spotlight = client.get("/api/spotlight").json()
    assert spotlight["userId"] == alice.id
    assert spotlight["user"]["username"] == "alice"
    assert "passwordHash" not in spotlight["user"]


def test_newest_active_spotlight_wins(client, make_user, login):
    alice = make_user("alice")
    bob = make_user("bob")
    make_user("boardie", level=UserLevel.BOARD_MEMBER)
    login("boardie")
    _feature(client, alice.id)
    newest = _feature(client, bob.id)

    assert client.get("/api/spotlight").json()["id"] == newest["id"]


def test_expired_and_inactive_spotlights_are_hidden(client, make_user, login):
    alice = make_user("alice")
    bob = make_user("bob")
    make_user("boardie", level=UserLevel.BOARD_MEMBER)
    login("boardie")
    yesterday = get_current_date() - timedelta(days=1)
    _feature(client, alice.id, featuredUntil=yesterday.isoformat())
    _feature(client, bob.id, active=False)

    assert client.get("/api/spotlight").json() is None
    assert len(client.get("/api/admin/spotlights").json()) == 2


def test_spotlight_ending_today_is_still_active(client, make_user, login):
    alice = make_user("alice")
    make_user("boardie", level=UserLevel.BOARD_MEMBER)
    login("boardie")
    _feature(client, alice.id, featuredUntil=get_current_date().isoformat())

    assert client.get("/api/spotlight").json()["userId"] == alice.id


def test_spotlight_for_unknown_member_is_404(client, make_user, login):
    make_user("boardie", level=UserLevel.BOARD_MEMBER)
    login("boardie")

    response = client.post("/api/member-spotlights", json={"userId": 999, "description": "Ghost"})
    assert response.status_code == 404
