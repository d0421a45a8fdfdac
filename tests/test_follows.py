"""Integration tests for the follow graph."""
from __future__ import annotations


def _followers(client, user: str) -> list[str]:
    return client.get(f"/follows/{user}/followers").json()["items"]


def _following(client, user: str) -> list[str]:
    return client.get(f"/follows/{user}/following").json()["items"]


def test_follow_updates_both_directions(as_user):
    client = as_user("alice")
    response = client.post("/follows/bob")
    assert response.status_code == 201, response.text
    payload = response.json()
    assert payload["status"] == "followed"
    assert payload["followers_count"] == 1
    assert payload["is_following"] is True

    assert _following(client, "alice") == ["bob"]
    assert _followers(client, "bob") == ["alice"]
    assert _followers(client, "alice") == []


def test_follow_is_independent_of_friendship(as_user):
    as_user("alice").post("/follows/bob")
    assert as_user("alice").get("/friends/status/bob").json()["status"] is None
    assert as_user("bob").get("/friends/bob").json()["friends"] == []


def test_repeated_follow_is_a_noop(as_user):
    client = as_user("alice")
    client.post("/follows/bob")
    again = client.post("/follows/bob")
    assert again.json()["status"] == "noop"
    assert _followers(client, "bob") == ["alice"]


def test_self_follow_is_rejected(as_user):
    client = as_user("alice")
    response = client.post("/follows/alice")
    assert response.status_code == 400
    assert _following(client, "alice") == []


def test_unfollow_removes_edge_and_missing_edge_is_lenient(as_user):
    client = as_user("alice")
    client.post("/follows/bob")

    removed = client.delete("/follows/bob")
    assert removed.status_code == 200
    assert removed.json()["status"] == "unfollowed"
    assert _following(client, "alice") == []
    assert _followers(client, "bob") == []

    missing = client.delete("/follows/bob")
    assert missing.status_code == 200
    assert missing.json()["status"] == "noop"


def test_stats_report_counts_for_viewer(as_user):
    as_user("alice").post("/follows/carol")
    as_user("bob").post("/follows/carol")
    as_user("carol").post("/follows/alice")

    stats = as_user("bob").get("/follows/carol/stats").json()
    assert stats == {"user_id": "carol", "followers_count": 2, "following_count": 1, "is_following": True}


def test_new_follower_notification(as_user):
    as_user("alice").post("/follows/bob")
    as_user("alice").post("/follows/bob")
    items = as_user("bob").get("/notifications").json()["items"]
    assert [item["type"] for item in items] == ["follow.new"]
