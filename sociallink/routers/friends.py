"""Friend request API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import FriendRequestEntry
from ..schemas import (
    FriendListResponse,
    FriendRequestRespondPayload,
    FriendRequestResponse,
    FriendRequestStatusResponse,
    OutgoingFriendRequest,
    PendingFriendRequest,
)
from ..services import (
    Principal,
    get_current_principal,
    get_request_status,
    list_friends,
    list_outgoing_requests,
    list_pending_requests,
    respond_to_request,
    send_friend_request,
)

router = APIRouter(prefix="/friends", tags=["friends"])


def _request_response(entry: FriendRequestEntry) -> FriendRequestResponse:
    return FriendRequestResponse(
        owner_id=entry.owner_id,
        counterpart_id=entry.counterpart_id,
        requester_id=entry.requester_id,
        status=entry.status.value,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
    )


@router.post("/requests/{to}", response_model=FriendRequestResponse, status_code=status.HTTP_201_CREATED)
async def send_friend_request_endpoint(
    to: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> FriendRequestResponse:
    entry = send_friend_request(db, sender_id=current.id, recipient_id=to)
    return _request_response(entry)


@router.post("/requests/{from_id}/respond", response_model=FriendRequestResponse)
async def respond_to_friend_request_endpoint(
    from_id: str,
    payload: FriendRequestRespondPayload,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> FriendRequestResponse:
    entry = respond_to_request(db, responder_id=current.id, requester_id=from_id, accept=payload.accept)
    return _request_response(entry)


@router.get("/requests/pending", response_model=list[PendingFriendRequest])
async def pending_friend_requests(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> list[PendingFriendRequest]:
    entries = list_pending_requests(db, user_id=current.id)
    return [PendingFriendRequest(from_=entry.counterpart_id, timestamp=entry.updated_at) for entry in entries]


@router.get("/requests/outgoing", response_model=list[OutgoingFriendRequest])
async def outgoing_friend_requests(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> list[OutgoingFriendRequest]:
    entries = list_outgoing_requests(db, user_id=current.id)
    return [OutgoingFriendRequest(to=entry.counterpart_id, timestamp=entry.updated_at) for entry in entries]


@router.get("/status/{user_id}", response_model=FriendRequestStatusResponse)
async def friend_request_status(
    user_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> FriendRequestStatusResponse:
    status_value = get_request_status(db, viewer_id=current.id, other_id=user_id)
    return FriendRequestStatusResponse(user_id=user_id, status=status_value.value if status_value else None)


@router.get("/{user_id}", response_model=FriendListResponse)
async def friends_of_user(
    user_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> FriendListResponse:
    return FriendListResponse(user_id=user_id, friends=list_friends(db, user_id=user_id))


__all__ = ["router"]
