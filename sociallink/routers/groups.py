"""Group and group messaging API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import Group
from ..schemas import GroupCreate, GroupMessageCreate, GroupMessageResponse, GroupResponse
from ..services import (
    Principal,
    add_group_member,
    create_group,
    delete_group,
    get_current_principal,
    get_group,
    list_group_messages,
    list_my_groups,
    remove_group_member,
    send_group_message,
)

router = APIRouter(prefix="/groups", tags=["groups"])


def _to_group_response(group: Group) -> GroupResponse:
    return GroupResponse.model_validate(group)


@router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
async def create_group_endpoint(
    payload: GroupCreate,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> GroupResponse:
    group = create_group(db, creator_id=current.id, name=payload.name)
    return _to_group_response(group)


@router.get("", response_model=list[GroupResponse])
async def my_groups_endpoint(
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> list[GroupResponse]:
    return [_to_group_response(group) for group in list_my_groups(db, user_id=current.id)]


@router.get("/{group_id}", response_model=GroupResponse | None)
async def group_detail_endpoint(
    group_id: int,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> GroupResponse | None:
    group = get_group(db, group_id=group_id, requester_id=current.id)
    return _to_group_response(group) if group is not None else None


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_group_endpoint(
    group_id: int,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> None:
    delete_group(db, group_id=group_id, requester=current)


@router.post("/{group_id}/members/{member_id}", response_model=GroupResponse)
async def add_group_member_endpoint(
    group_id: int,
    member_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> GroupResponse:
    group = add_group_member(db, group_id=group_id, requester_id=current.id, member_id=member_id)
    return _to_group_response(group)


@router.delete("/{group_id}/members/{member_id}", response_model=GroupResponse)
async def remove_group_member_endpoint(
    group_id: int,
    member_id: str,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> GroupResponse:
    group = remove_group_member(db, group_id=group_id, requester_id=current.id, member_id=member_id)
    return _to_group_response(group)


@router.post("/{group_id}/messages", response_model=GroupMessageResponse, status_code=status.HTTP_201_CREATED)
async def send_group_message_endpoint(
    group_id: int,
    payload: GroupMessageCreate,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> GroupMessageResponse:
    record = send_group_message(db, group_id=group_id, sender_id=current.id, content=payload.content)
    return GroupMessageResponse.model_validate(record)


@router.get("/{group_id}/messages", response_model=list[GroupMessageResponse])
async def group_messages_endpoint(
    group_id: int,
    current: Principal = Depends(get_current_principal),
    db: Session = Depends(get_session),
) -> list[GroupMessageResponse]:
    records = list_group_messages(db, group_id=group_id, requester_id=current.id)
    return [GroupMessageResponse.model_validate(record) for record in records]


__all__ = ["router"]
