"""Notification API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..schemas import NotificationListResponse, NotificationResponse, NotificationSummaryResponse
from ..services import (
    Principal,
    count_unread_notifications,
    get_current_principal,
    list_notifications,
    mark_all_read,
    mark_notification_read,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_my_notifications(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> NotificationListResponse:
    records = list_notifications(db, current.id)
    return NotificationListResponse(items=[NotificationResponse.model_validate(item) for item in records])


@router.get("/summary", response_model=NotificationSummaryResponse)
async def notification_summary_endpoint(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> NotificationSummaryResponse:
    return NotificationSummaryResponse(unread_count=count_unread_notifications(db, current.id))


@router.post("/mark-read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_notifications_read(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> None:
    mark_all_read(db, current.id)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read_endpoint(
    notification_id: int,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> NotificationResponse:
    record = mark_notification_read(db, recipient_id=current.id, notification_id=notification_id)
    return NotificationResponse.model_validate(record)


__all__ = ["router"]
