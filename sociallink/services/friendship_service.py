"""Business logic for friend requests and friendships.

Each relationship is kept as two mirrored ``FriendRequestEntry`` rows, one
per side. Every transition rewrites both rows and commits once, so a reader
never sees the pair disagree.
"""
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import FriendRequestEntry, FriendRequestStatus
from ..models.base import utcnow
from .notification_service import NotificationType, add_notification

logger = logging.getLogger(__name__)


def _entry(db: Session, owner_id: str, counterpart_id: str) -> FriendRequestEntry | None:
    return db.get(FriendRequestEntry, (owner_id, counterpart_id))


def _entry_pair(db: Session, first: str, second: str) -> tuple[FriendRequestEntry | None, FriendRequestEntry | None]:
    return _entry(db, first, second), _entry(db, second, first)


def _write_pair(
    db: Session,
    *,
    first: str,
    second: str,
    requester_id: str,
    status_value: FriendRequestStatus,
) -> FriendRequestEntry:
    """Stage the same status on both sides and return ``first``'s entry."""

    now = utcnow()
    entries: list[FriendRequestEntry] = []
    for owner_id, counterpart_id in ((first, second), (second, first)):
        entry = _entry(db, owner_id, counterpart_id)
        if entry is None:
            entry = FriendRequestEntry(owner_id=owner_id, counterpart_id=counterpart_id, created_at=now)
            db.add(entry)
        entry.requester_id = requester_id
        entry.status = status_value
        entry.updated_at = now
        entries.append(entry)
    return entries[0]


def _commit(db: Session, detail: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail) from exc


def send_friend_request(db: Session, *, sender_id: str, recipient_id: str) -> FriendRequestEntry:
    """Open a pending request from ``sender_id`` to ``recipient_id``.

    A pending or accepted pair is a conflict. A declined pair may be asked
    again, which resets both sides to pending with the new requester.
    """

    recipient_id = recipient_id.strip()
    if not recipient_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Recipient required")
    if recipient_id == sender_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot befriend yourself")

    existing = _entry(db, sender_id, recipient_id)
    if existing is not None:
        if existing.status == FriendRequestStatus.ACCEPTED:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already friends")
        if existing.status == FriendRequestStatus.PENDING:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Pending request already exists")

    entry = _write_pair(
        db,
        first=sender_id,
        second=recipient_id,
        requester_id=sender_id,
        status_value=FriendRequestStatus.PENDING,
    )
    _commit(db, "Failed to send request")
    db.refresh(entry)

    add_notification(
        db,
        recipient_id=recipient_id,
        sender_id=sender_id,
        content="You have a new friend request.",
        type_=NotificationType.FRIEND_REQUEST,
        payload={"from": sender_id},
    )
    return entry


def respond_to_request(db: Session, *, responder_id: str, requester_id: str, accept: bool) -> FriendRequestEntry:
    """Resolve the pending request ``requester_id`` sent to ``responder_id``."""

    entry, mirrored = _entry_pair(db, responder_id, requester_id)
    if entry is None or mirrored is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")
    if entry.status != FriendRequestStatus.PENDING:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Request already processed")
    if entry.requester_id == responder_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Cannot respond to your own request")

    outcome = FriendRequestStatus.ACCEPTED if accept else FriendRequestStatus.DECLINED
    entry = _write_pair(
        db,
        first=responder_id,
        second=requester_id,
        requester_id=requester_id,
        status_value=outcome,
    )
    _commit(db, "Failed to update request")
    db.refresh(entry)
    logger.info("Friend request %s -> %s %s", requester_id, responder_id, outcome.value)

    if accept:
        add_notification(
            db,
            recipient_id=requester_id,
            sender_id=responder_id,
            content="Your friend request was accepted.",
            type_=NotificationType.FRIEND_ADDED,
            payload={"friend": responder_id},
        )
    return entry


def list_friends(db: Session, *, user_id: str) -> list[str]:
    stmt = (
        select(FriendRequestEntry.counterpart_id)
        .where(
            FriendRequestEntry.owner_id == user_id,
            FriendRequestEntry.status == FriendRequestStatus.ACCEPTED,
        )
        .order_by(FriendRequestEntry.updated_at.asc())
    )
    return list(db.scalars(stmt))


def list_pending_requests(db: Session, *, user_id: str) -> list[FriendRequestEntry]:
    """Pending requests directed at ``user_id``."""

    stmt = (
        select(FriendRequestEntry)
        .where(
            FriendRequestEntry.owner_id == user_id,
            FriendRequestEntry.status == FriendRequestStatus.PENDING,
            FriendRequestEntry.requester_id != user_id,
        )
        .order_by(FriendRequestEntry.updated_at.asc())
    )
    return list(db.scalars(stmt))


def list_outgoing_requests(db: Session, *, user_id: str) -> list[FriendRequestEntry]:
    stmt = (
        select(FriendRequestEntry)
        .where(
            FriendRequestEntry.owner_id == user_id,
            FriendRequestEntry.status == FriendRequestStatus.PENDING,
            FriendRequestEntry.requester_id == user_id,
        )
        .order_by(FriendRequestEntry.updated_at.asc())
    )
    return list(db.scalars(stmt))


def get_request_status(db: Session, *, viewer_id: str, other_id: str) -> FriendRequestStatus | None:
    entry = _entry(db, viewer_id, other_id)
    if entry is None:
        return None
    return FriendRequestStatus(entry.status)


__all__ = [
    "send_friend_request",
    "respond_to_request",
    "list_friends",
    "list_pending_requests",
    "list_outgoing_requests",
    "get_request_status",
]
