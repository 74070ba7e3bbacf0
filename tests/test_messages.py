from blu_networking.domain.models.user import UserLevel


def _send(client, to_user_id, subject="Hello", message="Coffee next week?"):
    return client.post("/api/messages", json={"toUserId": to_user_id, "subject": subject, "message": message})


def test_send_and_list_messages(client, make_chapter, make_user, login):
    chapter = make_chapter()
    alice = make_user("alice", chapter_id=chapter.id)
    bob = make_user("bob", chapter_id=chapter.id)
    login("alice")

    response = _send(client, bob.id)
    assert response.status_code == 201
    sent = response.json()
    assert sent["fromUserId"] == alice.id
    assert sent["chapterId"] == chapter.id
    assert sent["isRead"] is False

    login("bob")
    inbox = client.get("/api/messages").json()
    assert [m["id"] for m in inbox] == [sent["id"]]

    conversation = client.get(f"/api/messages/{alice.id}").json()
    assert len(conversation) == 1


def test_message_to_unknown_recipient_is_404(client, make_chapter, make_user, login):
    make_user("alice", chapter_id=make_chapter().id)
    login("alice")

    assert _send(client, 999).status_code == 404


def test_cannot_message_yourself(client, make_chapter, make_user, login):
    alice = make_user("alice", chapter_id=make_chapter().id)
    login("alice")

    assert _send(client, alice.id).status_code == 400


def test_message_needs_a_chapter(client, make_user, login):
    make_user("alice")
    bob = make_user("bob")
    login("alice")

    response = _send(client, bob.id)
    assert response.status_code == 400
    assert response.json() == {"message": "A chapter is required to send messages"}


def test_only_recipient_marks_read(client, make_chapter, make_user, login):
    chapter = make_chapter()
    make_user("alice", chapter_id=chapter.id)
    bob = make_user("bob", chapter_id=chapter.id)
    login("alice")
    message_id = _send(client, bob.id).json()["id"]

    assert client.patch(f"/api/messages/{message_id}/read").status_code == 403

    login("bob")
    response = client.patch(f"/api/messages/{message_id}/read")
    assert response.status_code == 200
    assert response.json()["isRead"] is True

    assert client.patch("/api/messages/999/read").status_code == 404


def test_chapter_feed_is_for_board(client, make_chapter, make_user, login):
    chapter = make_chapter()
    make_user("alice", chapter_id=chapter.id)
    bob = make_user("bob", chapter_id=chapter.id)
    make_user("boardie", level=UserLevel.BOARD_MEMBER, chapter_id=chapter.id)
    login("alice")
    _send(client, bob.id)

    assert client.get("/api/messages/chapter").status_code == 403

    login("boardie")
    feed = client.get("/api/messages/chapter").json()
    assert len(feed) == 1


def test_connections_count_distinct_contacts(client, make_chapter, make_user, login):
    chapter = make_chapter()
    make_user("alice", chapter_id=chapter.id)
    bob = make_user("bob", chapter_id=chapter.id)
    carol = make_user("carol", chapter_id=chapter.id)
    login("alice")
    _send(client, bob.id)
    _send(client, bob.id, subject="Again")
    _send(client, carol.id)

    assert client.get("/api/stats").json()["connections"] == 2
