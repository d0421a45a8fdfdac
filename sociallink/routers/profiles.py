"""Profile directory API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_session
from ..schemas import ProfileResponse, ProfileUpdateRequest
from ..services import Principal, get_current_principal, get_profile, save_profile

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileResponse | None)
async def my_profile_endpoint(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> ProfileResponse | None:
    profile = get_profile(db, current.id)
    return ProfileResponse.model_validate(profile) if profile is not None else None


@router.put("/me", response_model=ProfileResponse)
async def save_my_profile_endpoint(
    payload: ProfileUpdateRequest,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> ProfileResponse:
    profile = save_profile(db, principal_id=current.id, payload=payload)
    return ProfileResponse.model_validate(profile)


@router.get("/{principal_id}", response_model=ProfileResponse | None)
async def profile_endpoint(
    principal_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> ProfileResponse | None:
    profile = get_profile(db, principal_id)
    return ProfileResponse.model_validate(profile) if profile is not None else None


__all__ = ["router"]
