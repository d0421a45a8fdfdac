"""Tests for the profile directory."""
from __future__ import annotations

from sociallink.database import SessionLocal
from sociallink.services import resolve_display_name


def test_profile_absent_until_saved(as_user):
    client = as_user("alice")
    assert client.get("/profiles/me").json() is None

    saved = client.put("/profiles/me", json={"display_name": "  Alice A.  ", "bio": "hi"})
    assert saved.status_code == 200
    assert saved.json()["display_name"] == "Alice A."

    public = as_user("bob").get("/profiles/alice").json()
    assert public["display_name"] == "Alice A."
    assert public["bio"] == "hi"


def test_profile_update_replaces_fields(as_user):
    client = as_user("alice")
    client.put("/profiles/me", json={"display_name": "Alice", "bio": "first"})
    updated = client.put("/profiles/me", json={"display_name": "Alice"}).json()
    assert updated["bio"] is None


def test_blank_display_name_rejected(as_user):
    client = as_user("alice")
    assert client.put("/profiles/me", json={"display_name": "   "}).status_code == 400
    assert client.get("/profiles/me").json() is None


def test_display_name_falls_back_to_principal(as_user):
    as_user("bob").put("/profiles/me", json={"display_name": "Bobby"})
    with SessionLocal() as session:
        assert resolve_display_name(session, "bob") == "Bobby"
        assert resolve_display_name(session, "ghost") == "ghost"
