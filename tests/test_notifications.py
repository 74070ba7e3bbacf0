from unittest.mock import AsyncMock, patch

import pytest

from blu_networking.domain.models.user import UserLevel

MINUTES_BODY = {
    "title": "October board meeting",
    "meetingDate": "2026-10-01",
    "attendees": ["Alice", "Bob"],
    "minutes": "Discussed the budget and the spring gala.",
}


@pytest.fixture
def mock_sender():
    def _patch(target):
        return patch(target, new_callable=AsyncMock, return_value=True)
    return _patch


def test_register_sends_welcome_email(client, make_chapter, mock_sender):
    chapter = make_chapter("North Shore")

    with mock_sender("blu_networking.interfaces.api.auth.send_welcome_email") as sender:
        response = client.post("/api/register", json={
            "username": "janedoe",
            "password": "secret123",
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "company": "Doe Consulting",
            "title": "Founder",
            "chapterId": chapter.id,
        })

    assert response.status_code == 201
    sender.assert_called_once_with("jane@example.com", "Jane Doe", "North Shore")


def test_welcome_email_without_chapter_uses_platform_name(client, mock_sender):
    with mock_sender("blu_networking.interfaces.api.auth.send_welcome_email") as sender:
        client.post("/api/register", json={
            "username": "janedoe",
            "password": "secret123",
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "company": "Doe Consulting",
            "title": "Founder",
        })

    sender.assert_called_once_with("jane@example.com", "Jane Doe", "BLU Networking")


def test_failed_registration_sends_nothing(client, make_user, mock_sender):
    make_user("janedoe")

    with mock_sender("blu_networking.interfaces.api.auth.send_welcome_email") as sender:
        response = client.post("/api/register", json={
            "username": "janedoe",
            "password": "secret123",
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "company": "Doe Consulting",
            "title": "Founder",
        })

    assert response.status_code == 400
    sender.assert_not_called()


def test_event_registration_sends_confirmation(client, make_user, make_event, login, mock_sender):
    make_user("alice")
    event = make_event("Mixer")
    login("alice")

    with mock_sender("blu_networking.interfaces.api.events.send_event_registration_email") as sender:
        client.post("/api/event-registrations", json={"eventId": event.id})
        client.post("/api/event-registrations", json={"eventId": event.id})  # duplicate, rejected

    assert sender.call_count == 1
    to, name, title, when, location = sender.call_args.args
    assert (to, name, title, location) == ("alice@example.com", "Alice", "Mixer", "Main Hall")
    assert when == "Thursday, January 15, 2099 at 18:00"


def test_spotlight_notifies_featured_members_chapter(client, make_chapter, make_user, login, mock_sender):
    north = make_chapter("North")
    south = make_chapter("South")
    alice = make_user("alice", chapter_id=north.id)
    make_user("bob", chapter_id=north.id)
    make_user("carol", chapter_id=south.id)
    make_user("boardie", level=UserLevel.BOARD_MEMBER, chapter_id=north.id)
    login("boardie")

    with mock_sender("blu_networking.interfaces.api.spotlights.send_spotlight_notification_email") as sender:
        client.post("/api/member-spotlights", json={
            "userId": alice.id,
            "description": "Connected three members",
            "achievements": "Top referrer",
        })

    sender.assert_called_once()
    recipients, member_name, achievement = sender.call_args.args
    assert sorted(recipients) == ["alice@example.com", "bob@example.com", "boardie@example.com"]
    assert member_name == "Alice"
    assert achievement == "Top referrer"


def test_spotlight_for_member_without_chapter_sends_nothing(client, make_user, login, mock_sender):
    loner = make_user("loner")
    make_user("boardie", level=UserLevel.BOARD_MEMBER)
    login("boardie")

    with mock_sender("blu_networking.interfaces.api.spotlights.send_spotlight_notification_email") as sender:
        response = client.post("/api/member-spotlights", json={"userId": loner.id, "description": "Solo act"})

    assert response.status_code == 201
    sender.assert_not_called()


def test_minutes_notify_only_when_published(client, make_chapter, make_user, login, mock_sender):
    north = make_chapter("North")
    make_user("boardie", level=UserLevel.BOARD_MEMBER, chapter_id=north.id)
    make_user("member", chapter_id=north.id)
    make_user("outsider", chapter_id=make_chapter("South").id)
    login("boardie")

    with mock_sender("blu_networking.interfaces.api.board_minutes.send_board_minutes_email") as sender:
        minutes_id = client.post("/api/board-minutes", json=MINUTES_BODY).json()["id"]
        sender.assert_not_called()

        client.patch(f"/api/board-minutes/{minutes_id}", json={"isPublished": True})
        assert sender.call_count == 1

        client.patch(f"/api/board-minutes/{minutes_id}", json={"title": "October board meeting (final)"})
        client.patch(f"/api/board-minutes/{minutes_id}", json={"isPublished": True})
        assert sender.call_count == 1

    recipients, meeting_date, summary = sender.call_args.args
    assert sorted(recipients) == ["boardie@example.com", "member@example.com"]
    assert meeting_date == "2026-10-01"
    assert summary == MINUTES_BODY["minutes"]


def test_minutes_published_on_create_notify_once(client, make_chapter, make_user, login, mock_sender):
    make_user("boardie", level=UserLevel.BOARD_MEMBER, chapter_id=make_chapter().id)
    login("boardie")

    with mock_sender("blu_networking.interfaces.api.board_minutes.send_board_minutes_email") as sender:
        client.post("/api/board-minutes", json={**MINUTES_BODY, "isPublished": True})

    sender.assert_called_once()
