"""Schemas for the profile directory."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    principal_id: str
    display_name: str
    bio: str | None = None
    avatar_url: str | None = None
    updated_at: datetime


class ProfileUpdateRequest(BaseModel):
    display_name: str = Field(..., min_length=1, max_length=150)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=1024)


__all__ = ["ProfileResponse", "ProfileUpdateRequest"]
