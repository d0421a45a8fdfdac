"""Direct messaging services: sending, conversation projection and read state."""
from __future__ import annotations

from dataclasses import dataclass

from fastapi import HTTPException, status
from sqlalchemy import and_, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import DirectMessage
from ..schemas import DirectMessageResponse
from .event_stream import publish_event
from .notification_service import NotificationType, add_notification
from .profile_service import load_profiles

_PREVIEW_LENGTH = 160


@dataclass(slots=True)
class ConversationDigest:
    other_id: str
    display_name: str
    avatar_url: str | None
    last_message: DirectMessage
    unread_count: int


def _between(first: str, second: str):
    return or_(
        and_(DirectMessage.sender_id == first, DirectMessage.recipient_id == second),
        and_(DirectMessage.sender_id == second, DirectMessage.recipient_id == first),
    )


def send_message(db: Session, *, sender_id: str, recipient_id: str, content: str) -> DirectMessage:
    """Store an immutable direct message; the recipient need not have a profile."""

    recipient_id = recipient_id.strip()
    if not recipient_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Recipient required")
    if not content.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message requires text")

    message = DirectMessage(sender_id=sender_id, recipient_id=recipient_id, content=content)
    try:
        db.add(message)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to persist message") from exc
    db.refresh(message)

    publish_event(
        [sender_id, recipient_id],
        {"type": "message.created", "message": DirectMessageResponse.model_validate(message).model_dump()},
    )
    add_notification(
        db,
        recipient_id=recipient_id,
        sender_id=sender_id,
        content="You have a new message.",
        type_=NotificationType.MESSAGE_RECEIVED,
        payload={"message_id": message.id, "preview": content.strip()[:_PREVIEW_LENGTH]},
    )
    return message


def get_conversation(db: Session, *, viewer_id: str, other_id: str) -> list[DirectMessage]:
    """Return messages exchanged by ``viewer_id`` and ``other_id`` oldest first."""

    stmt = (
        select(DirectMessage)
        .where(_between(viewer_id, other_id))
        .order_by(DirectMessage.created_at.asc(), DirectMessage.id.asc())
    )
    return list(db.scalars(stmt))


def list_conversation_partners(db: Session, *, user_id: str) -> list[str]:
    """Distinct counterparts of ``user_id``, most recent activity first."""

    stmt = (
        select(DirectMessage)
        .where(or_(DirectMessage.sender_id == user_id, DirectMessage.recipient_id == user_id))
        .order_by(DirectMessage.created_at.desc(), DirectMessage.id.desc())
    )
    partners: dict[str, None] = {}
    for message in db.scalars(stmt):
        partners.setdefault(message.counterpart_of(user_id), None)
    return list(partners)


def summarize_conversations(db: Session, *, user_id: str) -> list[ConversationDigest]:
    stmt = (
        select(DirectMessage)
        .where(or_(DirectMessage.sender_id == user_id, DirectMessage.recipient_id == user_id))
        .order_by(DirectMessage.created_at.desc(), DirectMessage.id.desc())
    )
    latest: dict[str, DirectMessage] = {}
    unread: dict[str, int] = {}
    for message in db.scalars(stmt):
        other_id = message.counterpart_of(user_id)
        latest.setdefault(other_id, message)
        if message.recipient_id == user_id and message.sender_id == other_id and not message.read:
            unread[other_id] = unread.get(other_id, 0) + 1

    profiles = load_profiles(db, latest.keys())
    digests: list[ConversationDigest] = []
    for other_id, message in latest.items():
        profile = profiles.get(other_id)
        digests.append(
            ConversationDigest(
                other_id=other_id,
                display_name=profile.display_name if profile else other_id,
                avatar_url=profile.avatar_url if profile else None,
                last_message=message,
                unread_count=unread.get(other_id, 0),
            )
        )
    return digests


def mark_conversation_read(db: Session, *, reader_id: str, other_id: str) -> int:
    """Flag every unread message from ``other_id`` to ``reader_id`` as read."""

    stmt = (
        update(DirectMessage)
        .where(
            DirectMessage.sender_id == other_id,
            DirectMessage.recipient_id == reader_id,
            DirectMessage.read.is_(False),
        )
        .values(read=True)
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to mark conversation read") from exc
    return int(result.rowcount or 0)


def count_unread_messages(db: Session, *, user_id: str) -> int:
    stmt = (
        select(func.count())
        .select_from(DirectMessage)
        .where(DirectMessage.recipient_id == user_id, DirectMessage.read.is_(False))
    )
    return int(db.scalar(stmt) or 0)


__all__ = [
    "ConversationDigest",
    "send_message",
    "get_conversation",
    "list_conversation_partners",
    "summarize_conversations",
    "mark_conversation_read",
    "count_unread_messages",
]
