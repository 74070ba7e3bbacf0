from unittest.mock import patch

import pytest

from blu_networking.config import get_settings
from blu_networking.core.exceptions import BusinessRuleViolationException
from blu_networking.domain.models.user import User
from blu_networking.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

REGISTER_BODY = {
    "username": "janedoe",
    "password": "secret123",
    "fullName": "Jane Doe",
    "email": "jane@example.com",
    "company": "Doe Consulting",
    "title": "Founder",
}


def test_register_creates_member_and_starts_session(client):
    response = client.post("/api/register", json=REGISTER_BODY)

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "janedoe"
    assert body["fullName"] == "Jane Doe"
    assert body["userLevel"] == "member"
    assert body["isAdmin"] is False
    assert "password" not in body and "passwordHash" not in body

    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


def test_register_cannot_choose_level(client):
    response = client.post("/api/register", json={**REGISTER_BODY, "userLevel": "executive_board", "isAdmin": True})

    assert response.status_code == 201
    assert response.json()["userLevel"] == "member"
    assert response.json()["isAdmin"] is False


def test_register_rejects_duplicate_username(client):
    client.post("/api/register", json=REGISTER_BODY)
    response = client.post("/api/register", json={**REGISTER_BODY, "email": "other@example.com"})

    assert response.status_code == 400
    assert response.json() == {"message": "Username already exists"}


def test_register_rejects_duplicate_email(client):
    client.post("/api/register", json=REGISTER_BODY)
    response = client.post("/api/register", json={**REGISTER_BODY, "username": "someoneelse"})

    assert response.status_code == 400
    assert response.json() == {"message": "Email already exists"}


def test_register_with_unknown_chapter_is_404(client):
    response = client.post("/api/register", json={**REGISTER_BODY, "chapterId": 999})
    assert response.status_code == 404


def test_login_with_bad_password_is_401(client, make_user):
    make_user("alice")
    response = client.post("/api/login", json={"username": "alice", "password": "wrong-password"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid username or password"}


def test_current_user_requires_session(client):
    client.cookies.clear()
    response = client.get("/api/user")

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_tampered_cookie_is_rejected(client, make_user, login):
    make_user("alice")
    login("alice")
    client.cookies.clear()
    client.cookies.set(get_settings().SESSION_COOKIE_NAME, "not-a-token")

    assert client.get("/api/user").status_code == 401


def test_logout_ends_session(client, make_user, login):
    make_user("alice")
    login("alice")

    assert client.post("/api/logout").status_code == 200
    assert client.get("/api/user").status_code == 401


def test_change_password(client, make_user, login):
    make_user("alice")
    login("alice")

    wrong = client.post("/api/change-password", json={"currentPassword": "nope", "newPassword": "brandnew1"})
    assert wrong.status_code == 400

    ok = client.post("/api/change-password", json={"currentPassword": "password123", "newPassword": "brandnew1"})
    assert ok.status_code == 200

    assert client.post("/api/login", json={"username": "alice", "password": "password123"}).status_code == 401
    assert client.post("/api/login", json={"username": "alice", "password": "brandnew1"}).status_code == 200


def test_superadmin_is_seeded_as_executive(client, superadmin):
    assert superadmin["userLevel"] == "executive_board"
    assert superadmin["isAdmin"] is True


def test_concurrent_duplicate_signup_is_400(client, db, make_user):
    make_user("janedoe", email="jane@example.com")

    # Both requests passed the uniqueness lookup before either insert landed
    with patch("blu_networking.application.services.auth_service.ensure_unique"):
        response = client.post("/api/register", json=REGISTER_BODY)

    assert response.status_code == 400
    assert response.json() == {"message": "Username or email already exists"}
    assert db.query(User).filter_by(username="janedoe").count() == 1


def test_user_repository_maps_constraint_violation(db, make_user):
    make_user("alice")
    repo = SQLAlchemyUserRepository(db, User)

    with pytest.raises(BusinessRuleViolationException):
        repo.create({
            "username": "alice",
            "password_hash": "x",
            "full_name": "Other Alice",
            "email": "other-alice@example.com",
            "company": "Acme",
            "title": "Consultant",
        })

    # Session is usable again after the rollback
    assert repo.get_by_username("alice").email == "alice@example.com"
