"""ORM models for the call signaling rendezvous."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from sociallink.database import Base
from .base import utcnow


class CallSession(Base):
    """Offer/answer exchange for one call; removed entirely when the call ends."""

    __tablename__ = "call_sessions"

    call_id = Column(String(600), primary_key=True)
    caller_id = Column(String(255), nullable=False)
    callee_id = Column(String(255), nullable=False, index=True)
    offer_sdp = Column(Text, nullable=False)
    answer_sdp = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    answered_at = Column(DateTime(timezone=True), nullable=True)

    candidates = relationship(
        "CallCandidate",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="CallCandidate.id",
    )

    def involves(self, principal_id: str) -> bool:
        return principal_id in {self.caller_id, self.callee_id}

    def counterpart_of(self, principal_id: str) -> str:
        return self.callee_id if principal_id == self.caller_id else self.caller_id


class CallCandidate(Base):
    __tablename__ = "call_ice_candidates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    call_id = Column(String(600), ForeignKey("call_sessions.call_id", ondelete="CASCADE"), nullable=False, index=True)
    contributor_id = Column(String(255), nullable=False)
    candidate = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    session = relationship("CallSession", back_populates="candidates")


__all__ = ["CallSession", "CallCandidate"]
