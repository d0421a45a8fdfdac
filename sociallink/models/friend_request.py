"""ORM model for the mirrored friend-request status maps."""
from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Column, Enum, Index, String

from sociallink.database import Base
from .base import TimestampMixin


class FriendRequestStatus(StrEnum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class FriendRequestEntry(TimestampMixin, Base):
    """One side of a relationship: ``owner_id``'s view of ``counterpart_id``.

    Every pair is stored twice (A->B and B->A) and both rows are written in the
    same transaction, so ``status`` is always identical on both sides.
    """

    __tablename__ = "friend_request_entries"

    owner_id = Column(String(255), primary_key=True)
    counterpart_id = Column(String(255), primary_key=True)
    requester_id = Column(String(255), nullable=False)
    status = Column(
        Enum(FriendRequestStatus, name="friend_request_status", values_callable=lambda enum: [item.value for item in enum]),
        nullable=False,
        default=FriendRequestStatus.PENDING,
    )

    __table_args__ = (Index("ix_friend_request_entries_owner_status", "owner_id", "status"),)


__all__ = ["FriendRequestEntry", "FriendRequestStatus"]
