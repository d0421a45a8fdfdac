"""Schemas supporting follower APIs."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class FollowStatsResponse(BaseModel):
    user_id: str
    followers_count: int
    following_count: int
    is_following: bool


class FollowActionResponse(FollowStatsResponse):
    status: Literal["followed", "unfollowed", "noop"]


class FollowListResponse(BaseModel):
    user_id: str
    items: list[str]


__all__ = ["FollowStatsResponse", "FollowActionResponse", "FollowListResponse"]
