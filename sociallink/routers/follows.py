"""Follow management API routes."""
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..schemas import FollowActionResponse, FollowListResponse, FollowStatsResponse
from ..services import (
    Principal,
    follow_user,
    get_current_principal,
    get_follow_stats,
    list_followers,
    list_following,
    unfollow_user,
)

router = APIRouter(prefix="/follows", tags=["follows"])


@router.post("/{target_id}", response_model=FollowActionResponse, status_code=status.HTTP_201_CREATED)
async def follow_user_endpoint(
    target_id: str,
    db: Session = Depends(get_session),
    current: Principal = Depends(get_current_principal),
) -> FollowActionResponse:
    changed = follow_user(db, follower_id=current.id, target_id=target_id)
    stats = get_follow_stats(db, user_id=target_id, viewer_id=current.id)
    payload = asdict(stats)
    payload["status"] = "followed" if changed else "noop"
    return FollowActionResponse(**payload)


@router.delete("/{target_id}", response_model=FollowActionResponse)
async def unfollow_user_endpoint(
    target_id: str,
    db: Session = Depends(get_session),
    current: Principal = Depends(get_current_principal),
) -> FollowActionResponse:
    changed = unfollow_user(db, follower_id=current.id, target_id=target_id)
    stats = get_follow_stats(db, user_id=target_id, viewer_id=current.id)
    payload = asdict(stats)
    payload["status"] = "unfollowed" if changed else "noop"
    return FollowActionResponse(**payload)


@router.get("/{user_id}/followers", response_model=FollowListResponse)
async def followers_endpoint(
    user_id: str,
    db: Session = Depends(get_session),
    current: Principal = Depends(get_current_principal),
) -> FollowListResponse:
    return FollowListResponse(user_id=user_id, items=list_followers(db, user_id=user_id))


@router.get("/{user_id}/following", response_model=FollowListResponse)
async def following_endpoint(
    user_id: str,
    db: Session = Depends(get_session),
    current: Principal = Depends(get_current_principal),
) -> FollowListResponse:
    return FollowListResponse(user_id=user_id, items=list_following(db, user_id=user_id))


@router.get("/{user_id}/stats", response_model=FollowStatsResponse)
async def follow_stats_endpoint(
    user_id: str,
    db: Session = Depends(get_session),
    current: Principal = Depends(get_current_principal),
) -> FollowStatsResponse:
    stats = get_follow_stats(db, user_id=user_id, viewer_id=current.id)
    return FollowStatsResponse(**asdict(stats))


__all__ = ["router"]
