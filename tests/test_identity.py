"""Tests for bearer-token identity resolution and the event socket."""
from __future__ import annotations

import pytest
from fastapi import HTTPException

from sociallink.services import Principal, create_access_token, decode_access_token


def test_token_round_trip_carries_role():
    principal = decode_access_token(create_access_token("moderator", role="admin"))
    assert principal == Principal(id="moderator", role="admin")
    assert principal.is_admin
    assert not decode_access_token(create_access_token("alice")).is_admin


def test_tampered_token_is_rejected():
    token = create_access_token("alice")
    with pytest.raises(HTTPException) as excinfo:
        decode_access_token(token + "x")
    assert excinfo.value.status_code == 401


def test_routes_require_bearer_token(client):
    assert client.get("/friends/requests/pending").status_code == 401
    assert client.get("/health").json() == {"status": "ok"}


def test_bearer_token_identifies_caller(client):
    headers = {"Authorization": f"Bearer {create_access_token('alice')}"}
    sent = client.post("/friends/requests/bob", headers=headers)
    assert sent.status_code == 201
    assert sent.json()["requester_id"] == "alice"


def test_event_socket_pushes_direct_messages(client):
    token = create_access_token("bob")
    with client.websocket_connect(f"/ws/events?token={token}") as websocket:
        assert websocket.receive_json() == {"type": "ready"}
        websocket.send_text("ping")
        assert websocket.receive_json() == {"type": "pong"}

        headers = {"Authorization": f"Bearer {create_access_token('alice')}"}
        client.post("/messages/direct/bob", json={"content": "are you there?"}, headers=headers)
        event = websocket.receive_json()
        assert event["type"] == "message.created"
        assert event["message"]["content"] == "are you there?"
