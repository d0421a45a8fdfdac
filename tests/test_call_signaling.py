"""Integration tests for the call signaling rendezvous."""
from __future__ import annotations

from sociallink.services import build_call_id

CALL_ID = build_call_id("alice", "bob")


def _offer(client, sdp: str = "v=0 offer", callee: str = "bob", call_id: str = CALL_ID):
    return client.put(f"/calls/{call_id}/offer", json={"sdp": sdp, "callee": callee})


def test_call_id_is_directional():
    assert CALL_ID == "alice-bob"
    assert build_call_id("bob", "alice") != CALL_ID


def test_full_call_lifecycle(as_user):
    stored = _offer(as_user("alice"))
    assert stored.status_code == 200, stored.text
    assert stored.json()["caller"] == "alice"

    offer = as_user("bob").get(f"/calls/{CALL_ID}/offer").json()
    assert offer["sdp"] == "v=0 offer"
    assert offer["callee"] == "bob"
    assert as_user("alice").get(f"/calls/{CALL_ID}/answer").json() is None

    answered = as_user("bob").put(f"/calls/{CALL_ID}/answer", json={"sdp": "v=0 answer"})
    assert answered.status_code == 200
    assert as_user("alice").get(f"/calls/{CALL_ID}/answer").json()["sdp"] == "v=0 answer"

    assert as_user("alice").post(f"/calls/{CALL_ID}/candidates", json={"candidate": "a-1"}).status_code == 204
    assert as_user("bob").post(f"/calls/{CALL_ID}/candidates", json={"candidate": "b-1"}).status_code == 204

    from_bob = as_user("alice").get(f"/calls/{CALL_ID}/candidates", params={"for": "bob"}).json()
    assert from_bob["candidates"] == ["b-1"]
    from_alice = as_user("bob").get(f"/calls/{CALL_ID}/candidates", params={"for": "alice"}).json()
    assert from_alice["candidates"] == ["a-1"]

    assert as_user("bob").delete(f"/calls/{CALL_ID}").status_code == 204
    assert as_user("alice").get(f"/calls/{CALL_ID}/offer").json() is None
    assert as_user("bob").get(f"/calls/{CALL_ID}/offer").json() is None
    assert as_user("bob").get(f"/calls/{CALL_ID}/candidates", params={"for": "alice"}).json()["candidates"] == []


def test_answer_keeps_offer_and_candidates(as_user):
    _offer(as_user("alice"))
    as_user("alice").post(f"/calls/{CALL_ID}/candidates", json={"candidate": "a-1"})
    as_user("bob").put(f"/calls/{CALL_ID}/answer", json={"sdp": "first"})
    as_user("bob").put(f"/calls/{CALL_ID}/answer", json={"sdp": "renegotiated"})

    client = as_user("bob")
    assert client.get(f"/calls/{CALL_ID}/offer").json()["sdp"] == "v=0 offer"
    assert client.get(f"/calls/{CALL_ID}/answer").json()["sdp"] == "renegotiated"
    assert client.get(f"/calls/{CALL_ID}/candidates", params={"for": "alice"}).json()["candidates"] == ["a-1"]


def test_new_offer_resets_session(as_user):
    _offer(as_user("alice"))
    as_user("alice").post(f"/calls/{CALL_ID}/candidates", json={"candidate": "a-1"})
    as_user("bob").put(f"/calls/{CALL_ID}/answer", json={"sdp": "answer"})

    _offer(as_user("alice"), sdp="v=0 retry")
    client = as_user("bob")
    assert client.get(f"/calls/{CALL_ID}/offer").json()["sdp"] == "v=0 retry"
    assert client.get(f"/calls/{CALL_ID}/answer").json() is None
    assert client.get(f"/calls/{CALL_ID}/candidates", params={"for": "alice"}).json()["candidates"] == []


def test_only_participants_touch_the_session(as_user):
    _offer(as_user("alice"))
    mallory = as_user("mallory")
    assert mallory.get(f"/calls/{CALL_ID}/offer").status_code == 403
    assert mallory.get(f"/calls/{CALL_ID}/answer").status_code == 403
    assert mallory.get(f"/calls/{CALL_ID}/candidates", params={"for": "alice"}).status_code == 403
    assert mallory.post(f"/calls/{CALL_ID}/candidates", json={"candidate": "x"}).status_code == 403
    assert mallory.put(f"/calls/{CALL_ID}/answer", json={"sdp": "x"}).status_code == 403
    assert _offer(mallory, callee="bob").status_code == 400
    assert mallory.delete(f"/calls/{CALL_ID}").status_code == 403
    assert as_user("bob").get(f"/calls/{CALL_ID}/offer").json()["caller"] == "alice"


def test_call_id_cannot_be_claimed_by_someone_else(as_user):
    claimed = _offer(as_user("mallory"), callee="bob")
    assert claimed.status_code == 400
    assert as_user("bob").get(f"/calls/{CALL_ID}/offer").json() is None

    stored = _offer(as_user("alice"))
    assert stored.status_code == 200, stored.text
    assert stored.json()["caller"] == "alice"


def test_call_id_must_match_direction(as_user):
    response = _offer(as_user("bob"), callee="alice")
    assert response.status_code == 400
    assert _offer(as_user("bob"), callee="alice", call_id=build_call_id("bob", "alice")).status_code == 200


def test_only_callee_may_answer(as_user):
    _offer(as_user("alice"))
    response = as_user("alice").put(f"/calls/{CALL_ID}/answer", json={"sdp": "self"})
    assert response.status_code == 403
    assert as_user("bob").get(f"/calls/{CALL_ID}/answer").json() is None


def test_absent_session_semantics(as_user):
    client = as_user("alice")
    assert client.get("/calls/alice-nobody/offer").json() is None
    assert client.get("/calls/alice-nobody/answer").json() is None
    assert client.put("/calls/alice-nobody/answer", json={"sdp": "x"}).status_code == 404
    assert client.post("/calls/alice-nobody/candidates", json={"candidate": "x"}).status_code == 404
    assert client.delete("/calls/alice-nobody").status_code == 404


def test_cannot_call_yourself(as_user):
    response = _offer(as_user("alice"), callee="alice", call_id="alice-alice")
    assert response.status_code == 400


def test_incoming_calls_list_unanswered_offers(as_user):
    as_user("bob").put("/profiles/me", json={"display_name": "Bobby"})
    _offer(as_user("bob"), callee="carol", call_id=build_call_id("bob", "carol"))
    _offer(as_user("alice"), callee="carol", call_id=build_call_id("alice", "carol"))

    incoming = as_user("carol").get("/calls/incoming").json()
    by_caller = {item["caller"]: item for item in incoming}
    assert set(by_caller) == {"alice", "bob"}
    assert by_caller["bob"]["caller_display_name"] == "Bobby"
    assert by_caller["alice"]["caller_display_name"] == "alice"

    as_user("carol").put(f"/calls/{build_call_id('bob', 'carol')}/answer", json={"sdp": "ok"})
    remaining = as_user("carol").get("/calls/incoming").json()
    assert [item["caller"] for item in remaining] == ["alice"]
