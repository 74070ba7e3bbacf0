import os

# Settings are read once at import time; point them at a throwaway database first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RESEND_API_KEY"] = ""
os.environ["AI_PROVIDER"] = "openai"
os.environ["OPENAI_API_KEY"] = "sk-test"

from datetime import date, time  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from blu_networking.application.services.auth_service import hash_password  # noqa: E402
from blu_networking.config import get_settings  # noqa: E402
from blu_networking.domain.models.chapter import Chapter  # noqa: E402
from blu_networking.domain.models.event import Event  # noqa: E402
from blu_networking.domain.models.user import User, UserLevel  # noqa: E402
from blu_networking.infrastructure.database import Base, SessionLocal, engine  # noqa: E402
from blu_networking.infrastructure.repositories.user_repository import SQLAlchemyUserRepository  # noqa: E402
from blu_networking.main import app  # noqa: E402

PASSWORD = "password123"


@pytest.fixture
def client():
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_chapter(db):
    def _make(name="Downtown", location="Springfield", **extra):
        chapter = Chapter(name=name, location=location, **extra)
        db.add(chapter)
        db.commit()
        db.refresh(chapter)
        return chapter
    return _make


@pytest.fixture
def make_user(db):
    repo = SQLAlchemyUserRepository(db, User)

    def _make(username, level=UserLevel.MEMBER, chapter_id=None, **extra):
        data = {
            "username": username,
            "password_hash": hash_password(PASSWORD),
            "full_name": extra.pop("full_name", username.title()),
            "email": extra.pop("email", f"{username}@example.com"),
            "company": extra.pop("company", "Acme"),
            "title": extra.pop("title", "Consultant"),
            "user_level": level,
            "chapter_id": chapter_id,
        }
        data.update(extra)
        return repo.create(data)
    return _make


@pytest.fixture
def make_event(db):
    def _make(title="Mixer", capacity=None, event_date=None, created_by_id=None):
        event = Event(
            title=title,
            description="Evening networking",
            date=event_date or date(2099, 1, 15),
            start_time=time(18, 0),
            end_time=time(20, 0),
            location="Main Hall",
            capacity=capacity,
            created_by_id=created_by_id,
        )
        db.add(event)
        db.commit()
        db.refresh(event)
        return event
    return _make


@pytest.fixture
def login(client):
    def _login(username, password=PASSWORD):
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return response.json()
    return _login


@pytest.fixture
def superadmin(login):
    settings = get_settings()
    return login(settings.SUPERADMIN_USERNAME, settings.SUPERADMIN_PASSWORD)
