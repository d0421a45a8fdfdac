"""Schemas for groups and group messages."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GroupCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)


class GroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    creator_id: str
    member_ids: list[str]
    created_at: datetime


class GroupMessageCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class GroupMessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    group_id: int
    sender_id: str
    content: str
    created_at: datetime


__all__ = ["GroupCreate", "GroupResponse", "GroupMessageCreate", "GroupMessageResponse"]
