"""SQLAlchemy ORM model for follower relationships."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String

from sociallink.database import Base
from .base import utcnow


class Follow(Base):
    """A single follow edge; indexed on both ends to serve followers and following."""

    __tablename__ = "follows"

    follower_id = Column(String(255), primary_key=True)
    following_id = Column(String(255), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


__all__ = ["Follow"]
