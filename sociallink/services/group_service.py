"""Group membership management and group messaging."""
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from ..models import Group, GroupMember, GroupMessage
from ..schemas import GroupMessageResponse
from .event_stream import publish_event
from .identity_service import Principal
from .notification_service import NotificationType, add_notification

logger = logging.getLogger(__name__)


def _commit(db: Session, detail: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail) from exc


def _get_group_or_404(db: Session, group_id: int) -> Group:
    group = db.get(Group, group_id)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    return group


def _ensure_group_membership(group: Group, principal_id: str) -> None:
    if not group.has_member(principal_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You are not a member of this group")


def _ensure_group_creator(group: Group, principal_id: str, detail: str) -> None:
    if group.creator_id != principal_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def create_group(db: Session, *, creator_id: str, name: str) -> Group:
    """Create a group whose only member is its creator."""

    cleaned = name.strip()
    if not cleaned:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Group name required")

    group = Group(name=cleaned, creator_id=creator_id)
    group.memberships.append(GroupMember(member_id=creator_id))
    db.add(group)
    _commit(db, "Failed to create group")
    db.refresh(group)
    return group


def list_my_groups(db: Session, *, user_id: str) -> list[Group]:
    stmt = (
        select(Group)
        .where(Group.memberships.any(GroupMember.member_id == user_id))
        .options(selectinload(Group.memberships))
        .order_by(Group.created_at.asc(), Group.id.asc())
    )
    return list(db.scalars(stmt))


def get_group(db: Session, *, group_id: int, requester_id: str) -> Group | None:
    """Return the group for a member, ``None`` when it does not exist."""

    group = db.get(Group, group_id)
    if group is None:
        return None
    _ensure_group_membership(group, requester_id)
    return group


def add_group_member(db: Session, *, group_id: int, requester_id: str, member_id: str) -> Group:
    group = _get_group_or_404(db, group_id)
    _ensure_group_creator(group, requester_id, "Only the group creator can add members")

    member_id = member_id.strip()
    if not member_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Member required")
    if group.has_member(member_id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User is already a member")

    group.memberships.append(GroupMember(member_id=member_id))
    _commit(db, "Failed to update group members")
    db.refresh(group)

    add_notification(
        db,
        recipient_id=member_id,
        sender_id=requester_id,
        content=f"You were added to the group '{group.name}'.",
        type_=NotificationType.GROUP_MEMBER_ADDED,
        payload={"group_id": group.id},
    )
    return group


def remove_group_member(db: Session, *, group_id: int, requester_id: str, member_id: str) -> Group:
    """Remove ``member_id``; the creator may remove anyone, others only themselves.

    A creator who leaves keeps the creator privileges on the group.
    """

    group = _get_group_or_404(db, group_id)
    if requester_id not in {group.creator_id, member_id}:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the group creator can remove other members")

    membership = next((item for item in group.memberships if item.member_id == member_id), None)
    if membership is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User is not a member of this group")
    if len(group.memberships) <= 1:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A group must keep at least one member")

    group.memberships.remove(membership)
    _commit(db, "Failed to update group members")
    db.refresh(group)
    return group


def delete_group(db: Session, *, group_id: int, requester: Principal) -> None:
    """Delete a group together with its memberships and messages."""

    group = _get_group_or_404(db, group_id)
    if not requester.is_admin:
        _ensure_group_creator(group, requester.id, "Only the group creator can delete the group")

    db.delete(group)
    _commit(db, "Failed to delete group")
    logger.info("Group %s deleted by %s", group_id, requester.id)


def send_group_message(db: Session, *, group_id: int, sender_id: str, content: str) -> GroupMessage:
    group = _get_group_or_404(db, group_id)
    _ensure_group_membership(group, sender_id)
    if not content.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message requires text")

    message = GroupMessage(group_id=group.id, sender_id=sender_id, content=content)
    db.add(message)
    _commit(db, "Failed to persist message")
    db.refresh(message)

    publish_event(
        group.member_ids,
        {"type": "group.message.created", "message": GroupMessageResponse.model_validate(message).model_dump()},
    )
    return message


def list_group_messages(db: Session, *, group_id: int, requester_id: str) -> list[GroupMessage]:
    group = _get_group_or_404(db, group_id)
    _ensure_group_membership(group, requester_id)
    stmt = (
        select(GroupMessage)
        .where(GroupMessage.group_id == group.id)
        .order_by(GroupMessage.created_at.asc(), GroupMessage.id.asc())
    )
    return list(db.scalars(stmt))


__all__ = [
    "create_group",
    "list_my_groups",
    "get_group",
    "add_group_member",
    "remove_group_member",
    "delete_group",
    "send_group_message",
    "list_group_messages",
]
