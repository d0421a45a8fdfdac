"""Direct messaging API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..schemas import (
    ConversationResponse,
    ConversationSummary,
    DirectMessageResponse,
    MarkReadResponse,
    MessageSendRequest,
    UnreadCountResponse,
)
from ..services import (
    Principal,
    count_unread_messages,
    get_conversation,
    get_current_principal,
    list_conversation_partners,
    mark_conversation_read,
    send_message,
    summarize_conversations,
)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/direct/{to}", response_model=DirectMessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message_endpoint(
    to: str,
    payload: MessageSendRequest,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> DirectMessageResponse:
    record = send_message(db, sender_id=current.id, recipient_id=to, content=payload.content)
    return DirectMessageResponse.model_validate(record)


@router.get("/direct/{other_id}", response_model=ConversationResponse)
async def conversation_endpoint(
    other_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> ConversationResponse:
    records = get_conversation(db, viewer_id=current.id, other_id=other_id)
    return ConversationResponse(
        other_id=other_id,
        messages=[DirectMessageResponse.model_validate(record) for record in records],
    )


@router.post("/direct/{other_id}/read", response_model=MarkReadResponse)
async def mark_conversation_read_endpoint(
    other_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> MarkReadResponse:
    updated = mark_conversation_read(db, reader_id=current.id, other_id=other_id)
    return MarkReadResponse(other_id=other_id, updated=updated)


@router.get("/conversations", response_model=list[str])
async def conversations_endpoint(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> list[str]:
    return list_conversation_partners(db, user_id=current.id)


@router.get("/conversations/summary", response_model=list[ConversationSummary])
async def conversation_summaries_endpoint(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> list[ConversationSummary]:
    return [
        ConversationSummary(
            other_id=digest.other_id,
            display_name=digest.display_name,
            avatar_url=digest.avatar_url,
            last_message=DirectMessageResponse.model_validate(digest.last_message),
            unread_count=digest.unread_count,
        )
        for digest in summarize_conversations(db, user_id=current.id)
    ]


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count_endpoint(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> UnreadCountResponse:
    return UnreadCountResponse(unread_count=count_unread_messages(db, user_id=current.id))


__all__ = ["router"]
