"""Display profiles looked up by principal."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String

from sociallink.database import Base
from .base import utcnow


class Profile(Base):
    __tablename__ = "profiles"

    principal_id = Column(String(255), primary_key=True)
    display_name = Column(String(150), nullable=False)
    bio = Column(String(500), nullable=True)
    avatar_url = Column(String(1024), nullable=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


__all__ = ["Profile"]
