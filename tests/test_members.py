from blu_networking.domain.models.user import User, UserLevel


def test_member_sees_only_own_chapter(client, make_chapter, make_user, login):
    north = make_chapter("North")
    south = make_chapter("South")
    make_user("alice", chapter_id=north.id)
    make_user("bob", chapter_id=north.id)
    make_user("carol", chapter_id=south.id)

    login("alice")
    response = client.get("/api/members")

    assert response.status_code == 200
    members = response.json()
    assert {m["username"] for m in members} == {"alice", "bob"}
    assert all(m["chapterId"] == north.id for m in members)


def test_board_member_sees_everyone(client, make_chapter, make_user, login):
    north = make_chapter("North")
    south = make_chapter("South")
    make_user("alice", chapter_id=north.id)
    make_user("carol", chapter_id=south.id)
    make_user("boardie", level=UserLevel.BOARD_MEMBER, chapter_id=north.id)

    login("boardie")
    usernames = {m["username"] for m in client.get("/api/members").json()}

    assert {"alice", "carol", "boardie", "superadmin"} <= usernames


def test_member_without_chapter_sees_only_self(client, make_chapter, make_user, login):
    chapter = make_chapter()
    make_user("loner")
    make_user("bob", chapter_id=chapter.id)

    login("loner")
    assert [m["username"] for m in client.get("/api/members").json()] == ["loner"]


def test_profile_update_strips_protected_fields(client, db, make_user, login):
    user = make_user("alice")
    login("alice")

    response = client.patch("/api/profile", json={
        "id": 999,
        "password": "hacked",
        "isAdmin": True,
        "joinedAt": "2000-01-01T00:00:00",
        "userLevel": "executive_board",
        "bio": "Connector of people",
        "industry": "Finance",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user.id
    assert body["isAdmin"] is False
    assert body["userLevel"] == "member"
    assert body["bio"] == "Connector of people"
    assert body["industry"] == "Finance"

    db.expire_all()
    stored = db.get(User, user.id)
    assert stored.joined_at.year != 2000
    # Old password still works
    assert client.post("/api/login", json={"username": "alice", "password": "password123"}).status_code == 200


def test_profile_update_rejects_taken_email(client, make_user, login):
    make_user("alice")
    make_user("bob")
    login("alice")

    response = client.patch("/api/profile", json={"email": "bob@example.com"})
    assert response.status_code == 400


def test_notification_preferences_acknowledged(client, make_user, login):
    make_user("alice")
    login("alice")

    response = client.patch("/api/notifications", json={"emailNotifications": False, "eventReminders": True})
    assert response.status_code == 200
    assert response.json() == {"message": "Notification preferences updated"}


def test_profile_rejects_null_for_required_fields(client, db, make_user, login):
    user = make_user("alice")
    login("alice")

    for field in ("fullName", "email", "company", "title"):
        response = client.patch("/api/profile", json={field: None})
        assert response.status_code == 400, field
        assert response.json()["message"] == "Invalid request data"
        assert response.json()["errors"]

    db.expire_all()
    assert db.get(User, user.id).company == "Acme"


def test_profile_allows_clearing_optional_fields(client, make_user, login):
    make_user("alice", bio="Old bio")
    login("alice")

    response = client.patch("/api/profile", json={"bio": None})
    assert response.status_code == 200
    assert response.json()["bio"] is None
