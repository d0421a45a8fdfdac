"""Schemas used by direct messaging endpoints."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageSendRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class DirectMessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender_id: str
    recipient_id: str
    content: str
    created_at: datetime
    read: bool


class ConversationResponse(BaseModel):
    other_id: str
    messages: list[DirectMessageResponse]


class ConversationSummary(BaseModel):
    other_id: str
    display_name: str
    avatar_url: str | None = None
    last_message: DirectMessageResponse
    unread_count: int


class MarkReadResponse(BaseModel):
    other_id: str
    updated: int


class UnreadCountResponse(BaseModel):
    unread_count: int


__all__ = [
    "MessageSendRequest",
    "DirectMessageResponse",
    "ConversationResponse",
    "ConversationSummary",
    "MarkReadResponse",
    "UnreadCountResponse",
]
