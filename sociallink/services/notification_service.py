"""Notification sink for social-graph and messaging events."""
from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Notification
from ..schemas import NotificationResponse
from .event_stream import publish_event

logger = logging.getLogger(__name__)


class NotificationType(StrEnum):
    GENERIC = "generic"
    MESSAGE_RECEIVED = "message.received"
    NEW_FOLLOWER = "follow.new"
    FRIEND_REQUEST = "friend.request"
    FRIEND_ADDED = "friend.added"
    GROUP_MEMBER_ADDED = "group.member_added"


DEFAULT_NOTIFICATION_TYPE = NotificationType.GENERIC


def list_notifications(db: Session, recipient_id: str) -> list[Notification]:
    """Return notifications for the supplied recipient ordered newest first."""

    stmt = (
        select(Notification)
        .where(Notification.recipient_id == recipient_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    )
    return list(db.scalars(stmt))


def count_unread_notifications(db: Session, recipient_id: str) -> int:
    stmt = (
        select(func.count())
        .select_from(Notification)
        .where(Notification.recipient_id == recipient_id, Notification.read.is_(False))
    )
    return int(db.scalar(stmt) or 0)


def add_notification(
    db: Session,
    *,
    recipient_id: str,
    sender_id: str,
    content: str,
    type_: NotificationType | str = DEFAULT_NOTIFICATION_TYPE,
    payload: dict[str, Any] | None = None,
) -> Notification | None:
    """Persist a notification for ``recipient_id`` and push it when possible.

    Delivery is best effort: a failure is logged and rolled back so that the
    operation that triggered it keeps its own committed result.
    """

    if recipient_id == sender_id:
        return None

    notification = Notification(
        recipient_id=recipient_id,
        sender_id=sender_id,
        type=str(type_),
        content=content,
        payload=payload,
    )
    try:
        db.add(notification)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.warning("Failed to store %s notification for %s", type_, recipient_id)
        return None
    db.refresh(notification)

    publish_event(
        recipient_id,
        {
            "type": "notification.created",
            "notification": NotificationResponse.model_validate(notification).model_dump(),
        },
    )
    return notification


def mark_notification_read(db: Session, *, recipient_id: str, notification_id: int) -> Notification:
    notification = db.get(Notification, notification_id)
    if notification is None or notification.recipient_id != recipient_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    if notification.read:
        return notification

    notification.read = True
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update notification") from exc
    db.refresh(notification)
    return notification


def mark_all_read(db: Session, recipient_id: str) -> int:
    """Mark all notifications for the given recipient as read."""

    stmt = (
        update(Notification)
        .where(Notification.recipient_id == recipient_id, Notification.read.is_(False))
        .values(read=True)
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update notifications") from exc
    publish_event(recipient_id, {"type": "notification.read_all"})
    return int(result.rowcount or 0)


__all__ = [
    "NotificationType",
    "list_notifications",
    "count_unread_notifications",
    "add_notification",
    "mark_notification_read",
    "mark_all_read",
]
