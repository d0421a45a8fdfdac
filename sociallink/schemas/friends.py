"""Schemas for friend requests and friend listings."""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RequestStatusLiteral = Literal["pending", "accepted", "declined"]


class FriendRequestRespondPayload(BaseModel):
    accept: bool


class FriendRequestResponse(BaseModel):
    owner_id: str
    counterpart_id: str
    requester_id: str
    status: RequestStatusLiteral
    created_at: datetime
    updated_at: datetime


class PendingFriendRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from")
    timestamp: datetime


class OutgoingFriendRequest(BaseModel):
    to: str
    timestamp: datetime


class FriendListResponse(BaseModel):
    user_id: str
    friends: list[str]


class FriendRequestStatusResponse(BaseModel):
    user_id: str
    status: RequestStatusLiteral | None = None


__all__ = [
    "FriendRequestRespondPayload",
    "FriendRequestResponse",
    "PendingFriendRequest",
    "OutgoingFriendRequest",
    "FriendListResponse",
    "FriendRequestStatusResponse",
]
