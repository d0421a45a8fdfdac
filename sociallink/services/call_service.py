"""Rendezvous for peer-to-peer call signaling.

A session is keyed by ``build_call_id(caller, callee)`` and holds one offer,
an optional answer and the ICE candidates both sides contributed. Clients
poll these records; ``publish_event`` additionally pushes each change to the
counterpart when it holds an event socket.
"""
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import CallCandidate, CallSession
from ..models.base import utcnow
from .event_stream import publish_event

logger = logging.getLogger(__name__)

CALL_ID_SEPARATOR = "-"


def build_call_id(caller_id: str, callee_id: str) -> str:
    """Call ids are directional: the caller always comes first."""

    return f"{caller_id}{CALL_ID_SEPARATOR}{callee_id}"


def _commit(db: Session, detail: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail) from exc


def _get_session_or_404(db: Session, call_id: str) -> CallSession:
    session = db.get(CallSession, call_id)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Call not found")
    return session


def _ensure_participant(session: CallSession, principal_id: str) -> None:
    if not session.involves(principal_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You are not a participant in this call")


def store_call_offer(db: Session, *, call_id: str, caller_id: str, callee_id: str, sdp: str) -> CallSession:
    """Create the session, or replace an existing one with a fresh offer.

    ``call_id`` must be ``build_call_id(caller_id, callee_id)``, so only the
    caller named by the id can open or replace it. Replacing drops the
    previous answer and candidates.
    """

    call_id = call_id.strip()
    callee_id = callee_id.strip()
    if not callee_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Callee required")
    if callee_id == caller_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot call yourself")
    if call_id != build_call_id(caller_id, callee_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Call id does not match caller and callee")

    existing = db.get(CallSession, call_id)
    if existing is not None:
        logger.info("Replacing offer for call %s", call_id)
        db.delete(existing)
        db.flush()

    session = CallSession(call_id=call_id, caller_id=caller_id, callee_id=callee_id, offer_sdp=sdp)
    db.add(session)
    _commit(db, "Failed to store call offer")
    db.refresh(session)

    publish_event(callee_id, {"type": "call.offer", "call_id": call_id, "caller": caller_id})
    return session


def get_call_offer(db: Session, *, call_id: str, viewer_id: str) -> CallSession | None:
    session = db.get(CallSession, call_id)
    if session is None:
        return None
    _ensure_participant(session, viewer_id)
    return session


def store_call_answer(db: Session, *, call_id: str, callee_id: str, sdp: str) -> CallSession:
    """Record the callee's answer, keeping the offer and candidate list."""

    session = _get_session_or_404(db, call_id)
    if session.callee_id != callee_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the callee can answer this call")

    if session.answer_sdp is not None:
        logger.info("Replacing answer for call %s", call_id)
    session.answer_sdp = sdp
    session.answered_at = utcnow()
    _commit(db, "Failed to store call answer")
    db.refresh(session)

    publish_event(session.caller_id, {"type": "call.answer", "call_id": call_id})
    return session


def get_call_answer(db: Session, *, call_id: str, viewer_id: str) -> CallSession | None:
    """Return the session once it has an answer, else ``None``."""

    session = db.get(CallSession, call_id)
    if session is None:
        return None
    _ensure_participant(session, viewer_id)
    if session.answer_sdp is None:
        return None
    return session


def add_ice_candidate(db: Session, *, call_id: str, contributor_id: str, candidate: str) -> CallCandidate:
    session = _get_session_or_404(db, call_id)
    _ensure_participant(session, contributor_id)

    record = CallCandidate(contributor_id=contributor_id, candidate=candidate)
    session.candidates.append(record)
    _commit(db, "Failed to store ICE candidate")
    db.refresh(record)

    publish_event(
        session.counterpart_of(contributor_id),
        {"type": "call.candidate", "call_id": call_id, "contributor": contributor_id},
    )
    return record


def get_ice_candidates(db: Session, *, call_id: str, viewer_id: str, contributor_id: str) -> list[str]:
    """Candidates contributed by ``contributor_id``, in the order they arrived."""

    session = db.get(CallSession, call_id)
    if session is None:
        return []
    _ensure_participant(session, viewer_id)
    stmt = (
        select(CallCandidate.candidate)
        .where(CallCandidate.call_id == call_id, CallCandidate.contributor_id == contributor_id)
        .order_by(CallCandidate.id.asc())
    )
    return list(db.scalars(stmt))


def end_call(db: Session, *, call_id: str, requester_id: str) -> None:
    session = _get_session_or_404(db, call_id)
    _ensure_participant(session, requester_id)
    counterpart = session.counterpart_of(requester_id)

    db.delete(session)
    _commit(db, "Failed to end call")
    logger.info("Call %s ended by %s", call_id, requester_id)

    publish_event(counterpart, {"type": "call.ended", "call_id": call_id})


def list_incoming_calls(db: Session, *, callee_id: str) -> list[CallSession]:
    """Offers waiting for ``callee_id`` to answer, newest first."""

    stmt = (
        select(CallSession)
        .where(CallSession.callee_id == callee_id, CallSession.answer_sdp.is_(None))
        .order_by(CallSession.created_at.desc())
    )
    return list(db.scalars(stmt))


__all__ = [
    "CALL_ID_SEPARATOR",
    "build_call_id",
    "store_call_offer",
    "get_call_offer",
    "store_call_answer",
    "get_call_answer",
    "add_ice_candidate",
    "get_ice_candidates",
    "end_call",
    "list_incoming_calls",
]
