"""Call signaling API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import CallSession
from ..schemas import (
    CallAnswerRequest,
    CallAnswerResponse,
    CallOfferRequest,
    CallOfferResponse,
    IceCandidateListResponse,
    IceCandidateRequest,
    IncomingCallResponse,
)
from ..services import (
    Principal,
    add_ice_candidate,
    end_call,
    get_call_answer,
    get_call_offer,
    get_current_principal,
    get_ice_candidates,
    list_incoming_calls,
    load_profiles,
    store_call_answer,
    store_call_offer,
)

router = APIRouter(prefix="/calls", tags=["calls"])


def _offer_response(session: CallSession) -> CallOfferResponse:
    return CallOfferResponse(
        call_id=session.call_id,
        caller=session.caller_id,
        callee=session.callee_id,
        sdp=session.offer_sdp,
        created_at=session.created_at,
    )


def _answer_response(session: CallSession) -> CallAnswerResponse:
    return CallAnswerResponse(
        call_id=session.call_id,
        callee=session.callee_id,
        sdp=session.answer_sdp or "",
        answered_at=session.answered_at,
    )


@router.get("/incoming", response_model=list[IncomingCallResponse])
async def incoming_calls_endpoint(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> list[IncomingCallResponse]:
    sessions = list_incoming_calls(db, callee_id=current.id)
    profiles = load_profiles(db, (session.caller_id for session in sessions))
    results: list[IncomingCallResponse] = []
    for session in sessions:
        profile = profiles.get(session.caller_id)
        results.append(
            IncomingCallResponse(
                call_id=session.call_id,
                caller=session.caller_id,
                caller_display_name=profile.display_name if profile else session.caller_id,
                created_at=session.created_at,
            )
        )
    return results


@router.put("/{call_id}/offer", response_model=CallOfferResponse)
async def store_offer_endpoint(
    call_id: str,
    payload: CallOfferRequest,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> CallOfferResponse:
    session = store_call_offer(db, call_id=call_id, caller_id=current.id, callee_id=payload.callee, sdp=payload.sdp)
    return _offer_response(session)


@router.get("/{call_id}/offer", response_model=CallOfferResponse | None)
async def get_offer_endpoint(
    call_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> CallOfferResponse | None:
    session = get_call_offer(db, call_id=call_id, viewer_id=current.id)
    return _offer_response(session) if session is not None else None


@router.put("/{call_id}/answer", response_model=CallAnswerResponse)
async def store_answer_endpoint(
    call_id: str,
    payload: CallAnswerRequest,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> CallAnswerResponse:
    session = store_call_answer(db, call_id=call_id, callee_id=current.id, sdp=payload.sdp)
    return _answer_response(session)


@router.get("/{call_id}/answer", response_model=CallAnswerResponse | None)
async def get_answer_endpoint(
    call_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> CallAnswerResponse | None:
    session = get_call_answer(db, call_id=call_id, viewer_id=current.id)
    return _answer_response(session) if session is not None else None


@router.post("/{call_id}/candidates", status_code=status.HTTP_204_NO_CONTENT)
async def add_candidate_endpoint(
    call_id: str,
    payload: IceCandidateRequest,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> None:
    add_ice_candidate(db, call_id=call_id, contributor_id=current.id, candidate=payload.candidate)


@router.get("/{call_id}/candidates", response_model=IceCandidateListResponse)
async def get_candidates_endpoint(
    call_id: str,
    contributor: str = Query(..., alias="for", min_length=1),
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> IceCandidateListResponse:
    candidates = get_ice_candidates(db, call_id=call_id, viewer_id=current.id, contributor_id=contributor)
    return IceCandidateListResponse(call_id=call_id, contributor=contributor, candidates=candidates)


@router.delete("/{call_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_call_endpoint(
    call_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> None:
    end_call(db, call_id=call_id, requester_id=current.id)


__all__ = ["router"]
