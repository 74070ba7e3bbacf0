from blu_networking.config import get_settings
from blu_networking.domain.models.user import UserLevel

MINUTES_BODY = {
    "title": "October board meeting",
    "meetingDate": "2026-10-01",
    "attendees": ["Alice", "Bob"],
    "agenda": "Budget review",
    "minutes": "Discussed the budget and the spring gala.",
    "actionItems": ["Send the budget report"],
}


def _setup(make_chapter, make_user):
    north = make_chapter("North")
    south = make_chapter("South")
    make_user("boardie", level=UserLevel.BOARD_MEMBER, chapter_id=north.id)
    make_user("member", chapter_id=north.id)
    make_user("outsider", chapter_id=south.id)
    return north, south


def test_member_cannot_record_minutes(client, make_chapter, make_user, login):
    _setup(make_chapter, make_user)
    login("member")

    assert client.post("/api/board-minutes", json=MINUTES_BODY).status_code == 403


def test_unpublished_minutes_are_board_only(client, make_chapter, make_user, login):
    north, _ = _setup(make_chapter, make_user)
    login("boardie")
    created = client.post("/api/board-minutes", json=MINUTES_BODY)
    assert created.status_code == 201
    minutes = created.json()
    assert minutes["chapterId"] == north.id
    assert minutes["isPublished"] is False

    assert len(client.get("/api/board-minutes").json()) == 1

    login("member")
    assert client.get("/api/board-minutes").json() == []
    assert client.get(f"/api/board-minutes/{minutes['id']}").status_code == 404


def test_published_minutes_reach_chapter_members_only(client, make_chapter, make_user, login):
    _setup(make_chapter, make_user)
    login("boardie")
    minutes_id = client.post("/api/board-minutes", json=MINUTES_BODY).json()["id"]

    published = client.patch(f"/api/board-minutes/{minutes_id}", json={"isPublished": True})
    assert published.status_code == 200
    assert published.json()["isPublished"] is True
    assert published.json()["title"] == MINUTES_BODY["title"]

    login("member")
    assert [m["id"] for m in client.get("/api/board-minutes").json()] == [minutes_id]
    assert client.get(f"/api/board-minutes/{minutes_id}").status_code == 200

    login("outsider")
    assert client.get("/api/board-minutes").json() == []
    assert client.get(f"/api/board-minutes/{minutes_id}").status_code == 404


def test_executive_without_chapter_sees_everything(client, make_chapter, make_user, login):
    _setup(make_chapter, make_user)
    login("boardie")
    client.post("/api/board-minutes", json=MINUTES_BODY)

    settings = get_settings()
    login(settings.SUPERADMIN_USERNAME, settings.SUPERADMIN_PASSWORD)
    assert len(client.get("/api/board-minutes").json()) == 1


def test_board_cannot_write_other_chapter(client, make_chapter, make_user, login):
    _, south = _setup(make_chapter, make_user)
    login("boardie")

    response = client.post("/api/board-minutes", json={**MINUTES_BODY, "chapterId": south.id})
    assert response.status_code == 403


def test_minutes_require_attendees(client, make_chapter, make_user, login):
    _setup(make_chapter, make_user)
    login("boardie")

    response = client.post("/api/board-minutes", json={**MINUTES_BODY, "attendees": []})
    assert response.status_code == 400


def test_delete_minutes(client, make_chapter, make_user, login):
    _setup(make_chapter, make_user)
    login("boardie")
    minutes_id = client.post("/api/board-minutes", json=MINUTES_BODY).json()["id"]

    assert client.delete(f"/api/board-minutes/{minutes_id}").status_code == 204
    assert client.get(f"/api/board-minutes/{minutes_id}").status_code == 404
    assert client.delete(f"/api/board-minutes/{minutes_id}").status_code == 404


def test_null_action_items_clear_the_list(client, make_chapter, make_user, login):
    _setup(make_chapter, make_user)
    login("boardie")
    minutes_id = client.post("/api/board-minutes", json=MINUTES_BODY).json()["id"]

    response = client.patch(f"/api/board-minutes/{minutes_id}", json={"actionItems": None})
    assert response.status_code == 200
    assert response.json()["actionItems"] == []

    assert client.get(f"/api/board-minutes/{minutes_id}").json()["actionItems"] == []
    assert client.get("/api/board-minutes").status_code == 200


def test_null_required_fields_are_rejected(client, make_chapter, make_user, login):
    _setup(make_chapter, make_user)
    login("boardie")
    minutes_id = client.post("/api/board-minutes", json=MINUTES_BODY).json()["id"]

    for field in ("title", "meetingDate", "attendees", "minutes", "isPublished"):
        response = client.patch(f"/api/board-minutes/{minutes_id}", json={field: None})
        assert response.status_code == 400, field
        assert response.json()["message"] == "Invalid request data"

    assert client.get(f"/api/board-minutes/{minutes_id}").json()["title"] == MINUTES_BODY["title"]
