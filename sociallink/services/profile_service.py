"""Profile directory lookups used to label threads and calls."""
from __future__ import annotations

from typing import Iterable

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Profile
from ..schemas import ProfileUpdateRequest


def get_profile(db: Session, principal_id: str) -> Profile | None:
    return db.get(Profile, principal_id)


def save_profile(db: Session, *, principal_id: str, payload: ProfileUpdateRequest) -> Profile:
    """Create or replace the caller's display profile."""

    display_name = payload.display_name.strip()
    if not display_name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Display name required")

    profile = db.get(Profile, principal_id)
    if profile is None:
        profile = Profile(principal_id=principal_id, display_name=display_name)
        db.add(profile)
    profile.display_name = display_name
    profile.bio = (payload.bio or "").strip() or None
    profile.avatar_url = (payload.avatar_url or "").strip() or None

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save profile") from exc

    db.refresh(profile)
    return profile


def load_profiles(db: Session, principal_ids: Iterable[str]) -> dict[str, Profile]:
    ids = list(dict.fromkeys(principal_ids))
    if not ids:
        return {}
    stmt = select(Profile).where(Profile.principal_id.in_(ids))
    return {profile.principal_id: profile for profile in db.scalars(stmt)}


def resolve_display_name(db: Session, principal_id: str) -> str:
    """Return the display name for ``principal_id``, falling back to the principal."""

    profile = db.get(Profile, principal_id)
    if profile is None or not profile.display_name:
        return principal_id
    return profile.display_name


__all__ = ["get_profile", "save_profile", "load_profiles", "resolve_display_name"]
