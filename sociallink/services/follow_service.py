"""Business logic for follower relationships."""
from __future__ import annotations

from dataclasses import dataclass

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Follow
from .notification_service import NotificationType, add_notification


@dataclass(slots=True)
class FollowStats:
    user_id: str
    followers_count: int
    following_count: int
    is_following: bool


def _edge(db: Session, follower_id: str, target_id: str) -> Follow | None:
    return db.get(Follow, (follower_id, target_id))


def follow_user(db: Session, *, follower_id: str, target_id: str) -> bool:
    """Add the edge ``follower_id -> target_id``; returns False when it already exists."""

    if follower_id == target_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot follow yourself")

    if _edge(db, follower_id, target_id) is not None:
        return False

    db.add(Follow(follower_id=follower_id, following_id=target_id))
    try:
        db.commit()
    except SQLAlchemyError as exc:  # pragma: no cover - database errors
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Unable to follow user") from exc

    add_notification(
        db,
        recipient_id=target_id,
        sender_id=follower_id,
        content="You have a new follower.",
        type_=NotificationType.NEW_FOLLOWER,
        payload={"follower": follower_id},
    )
    return True


def unfollow_user(db: Session, *, follower_id: str, target_id: str) -> bool:
    record = _edge(db, follower_id, target_id)
    if record is None:
        return False
    try:
        db.delete(record)
        db.commit()
        return True
    except SQLAlchemyError as exc:  # pragma: no cover - database errors
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Unable to unfollow user") from exc


def list_followers(db: Session, *, user_id: str) -> list[str]:
    stmt = select(Follow.follower_id).where(Follow.following_id == user_id).order_by(Follow.created_at.asc())
    return list(db.scalars(stmt))


def list_following(db: Session, *, user_id: str) -> list[str]:
    stmt = select(Follow.following_id).where(Follow.follower_id == user_id).order_by(Follow.created_at.asc())
    return list(db.scalars(stmt))


def get_follow_stats(db: Session, *, user_id: str, viewer_id: str | None = None) -> FollowStats:
    followers_count = db.scalar(
        select(func.count()).select_from(Follow).where(Follow.following_id == user_id)
    ) or 0
    following_count = db.scalar(
        select(func.count()).select_from(Follow).where(Follow.follower_id == user_id)
    ) or 0

    is_following = False
    if viewer_id is not None:
        is_following = _edge(db, viewer_id, user_id) is not None

    return FollowStats(
        user_id=user_id,
        followers_count=int(followers_count),
        following_count=int(following_count),
        is_following=is_following,
    )


__all__ = ["FollowStats", "follow_user", "unfollow_user", "list_followers", "list_following", "get_follow_stats"]
