"""Integration tests for the mirrored friend-request state machine."""
from __future__ import annotations

import pytest

from sociallink.database import SessionLocal
from sociallink.models import FriendRequestEntry


def _status(owner: str, counterpart: str) -> str | None:
    with SessionLocal() as session:
        entry = session.get(FriendRequestEntry, (owner, counterpart))
        return entry.status.value if entry is not None else None


def test_friend_flow_keeps_both_sides_in_lock_step(as_user):
    sent = as_user("alice").post("/friends/requests/bob")
    assert sent.status_code == 201, sent.text
    assert sent.json()["status"] == "pending"
    assert _status("alice", "bob") == _status("bob", "alice") == "pending"

    accepted = as_user("bob").post("/friends/requests/alice/respond", json={"accept": True})
    assert accepted.status_code == 200, accepted.text
    assert _status("alice", "bob") == _status("bob", "alice") == "accepted"

    client = as_user("carol")
    assert client.get("/friends/alice").json()["friends"] == ["bob"]
    assert client.get("/friends/bob").json()["friends"] == ["alice"]


def test_declined_request_is_mirrored_and_not_a_friendship(as_user):
    as_user("alice").post("/friends/requests/bob")
    declined = as_user("bob").post("/friends/requests/alice/respond", json={"accept": False})
    assert declined.status_code == 200
    assert _status("alice", "bob") == _status("bob", "alice") == "declined"
    assert as_user("bob").get("/friends/bob").json()["friends"] == []


def test_pending_requests_only_list_incoming(as_user):
    as_user("alice").post("/friends/requests/bob")

    incoming = as_user("bob").get("/friends/requests/pending")
    assert incoming.status_code == 200
    body = incoming.json()
    assert [item["from"] for item in body] == ["alice"]
    assert body[0]["timestamp"]

    assert as_user("alice").get("/friends/requests/pending").json() == []
    outgoing = as_user("alice").get("/friends/requests/outgoing").json()
    assert [item["to"] for item in outgoing] == ["bob"]


def test_status_lookup_reports_null_without_relationship(as_user):
    client = as_user("alice")
    assert client.get("/friends/status/bob").json()["status"] is None
    client.post("/friends/requests/bob")
    assert client.get("/friends/status/bob").json()["status"] == "pending"
    assert as_user("bob").get("/friends/status/alice").json()["status"] == "pending"


def test_cannot_befriend_yourself(as_user):
    response = as_user("alice").post("/friends/requests/alice")
    assert response.status_code == 400
    assert _status("alice", "alice") is None


def test_responding_twice_is_rejected(as_user):
    as_user("alice").post("/friends/requests/bob")
    as_user("bob").post("/friends/requests/alice/respond", json={"accept": True})

    again = as_user("bob").post("/friends/requests/alice/respond", json={"accept": False})
    assert again.status_code == 409
    assert _status("alice", "bob") == _status("bob", "alice") == "accepted"


def test_responding_without_request_is_not_found(as_user):
    response = as_user("bob").post("/friends/requests/alice/respond", json={"accept": True})
    assert response.status_code == 404


def test_requester_cannot_accept_own_request(as_user):
    as_user("alice").post("/friends/requests/bob")
    response = as_user("alice").post("/friends/requests/bob/respond", json={"accept": True})
    assert response.status_code == 403
    assert _status("alice", "bob") == "pending"


@pytest.mark.parametrize("resolution", [None, True])
def test_resending_pending_or_accepted_pair_conflicts(as_user, resolution):
    as_user("alice").post("/friends/requests/bob")
    if resolution is not None:
        as_user("bob").post("/friends/requests/alice/respond", json={"accept": resolution})

    from_alice = as_user("alice").post("/friends/requests/bob")
    from_bob = as_user("bob").post("/friends/requests/alice")
    assert from_alice.status_code == 409
    assert from_bob.status_code == 409
    assert _status("alice", "bob") == _status("bob", "alice")


def test_declined_pair_can_be_requested_again(as_user):
    as_user("alice").post("/friends/requests/bob")
    as_user("bob").post("/friends/requests/alice/respond", json={"accept": False})

    retry = as_user("bob").post("/friends/requests/alice")
    assert retry.status_code == 201
    assert retry.json()["requester_id"] == "bob"
    assert _status("alice", "bob") == _status("bob", "alice") == "pending"
    assert [item["from"] for item in as_user("alice").get("/friends/requests/pending").json()] == ["bob"]


def test_friend_request_notifies_target(as_user):
    as_user("alice").post("/friends/requests/bob")
    items = as_user("bob").get("/notifications").json()["items"]
    assert [item["type"] for item in items] == ["friend.request"]
    assert items[0]["sender_id"] == "alice"
