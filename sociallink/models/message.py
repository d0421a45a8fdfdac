"""SQLAlchemy ORM model for direct messages."""
from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.sql import expression

from sociallink.database import Base
from .base import utcnow


class DirectMessage(Base):
    __tablename__ = "direct_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sender_id = Column(String(255), nullable=False, index=True)
    recipient_id = Column(String(255), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    read = Column(Boolean, nullable=False, server_default=expression.false(), default=False)

    __table_args__ = (Index("ix_direct_messages_recipient_read", "recipient_id", "read"),)

    def counterpart_of(self, principal_id: str) -> str:
        return self.recipient_id if self.sender_id == principal_id else self.sender_id


__all__ = ["DirectMessage"]
