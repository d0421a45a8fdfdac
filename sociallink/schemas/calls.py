"""Schemas for the call signaling endpoints."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CallOfferRequest(BaseModel):
    sdp: str = Field(..., min_length=1)
    callee: str = Field(..., min_length=1, max_length=255)


class CallAnswerRequest(BaseModel):
    sdp: str = Field(..., min_length=1)


class IceCandidateRequest(BaseModel):
    candidate: str = Field(..., min_length=1)


class CallOfferResponse(BaseModel):
    call_id: str
    caller: str
    callee: str
    sdp: str
    created_at: datetime


class CallAnswerResponse(BaseModel):
    call_id: str
    callee: str
    sdp: str
    answered_at: datetime | None = None


class IceCandidateListResponse(BaseModel):
    call_id: str
    contributor: str
    candidates: list[str]


class IncomingCallResponse(BaseModel):
    call_id: str
    caller: str
    caller_display_name: str
    created_at: datetime


__all__ = [
    "CallOfferRequest",
    "CallAnswerRequest",
    "IceCandidateRequest",
    "CallOfferResponse",
    "CallAnswerResponse",
    "IceCandidateListResponse",
    "IncomingCallResponse",
]
