"""Tests for the notification sink and its read tracking."""
from __future__ import annotations

from sociallink.database import SessionLocal
from sociallink.services import NotificationType, add_notification, list_notifications


def test_self_notifications_are_skipped():
    with SessionLocal() as session:
        created = add_notification(session, recipient_id="alice", sender_id="alice", content="hello me")
        assert created is None
        assert list_notifications(session, "alice") == []


def test_notifications_newest_first_and_summary(as_user):
    as_user("alice").post("/follows/bob")
    as_user("carol").post("/friends/requests/bob")

    client = as_user("bob")
    items = client.get("/notifications").json()["items"]
    assert [item["type"] for item in items] == [NotificationType.FRIEND_REQUEST, NotificationType.NEW_FOLLOWER]
    assert client.get("/notifications/summary").json()["unread_count"] == 2


def test_mark_single_notification_read(as_user):
    as_user("alice").post("/follows/bob")
    client = as_user("bob")
    notification_id = client.get("/notifications").json()["items"][0]["id"]

    marked = client.post(f"/notifications/{notification_id}/read")
    assert marked.status_code == 200
    assert marked.json()["read"] is True
    assert client.get("/notifications/summary").json()["unread_count"] == 0

    assert as_user("mallory").post(f"/notifications/{notification_id}/read").status_code == 404


def test_mark_all_read(as_user):
    as_user("alice").post("/follows/bob")
    as_user("alice").post("/messages/direct/bob", json={"content": "hello"})

    client = as_user("bob")
    assert client.get("/notifications/summary").json()["unread_count"] == 2
    assert client.post("/notifications/mark-read").status_code == 204
    assert client.get("/notifications/summary").json()["unread_count"] == 0
    assert all(item["read"] for item in client.get("/notifications").json()["items"])
