"""WebSocket endpoint for the optional per-principal push channel."""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter, HTTPException, Query, WebSocket, WebSocketDisconnect, status

from ..services import decode_access_token, event_stream_manager

router = APIRouter()
logger = logging.getLogger(__name__)


@router.websocket("/ws/events")
async def events_socket(
    websocket: WebSocket,
    token: str = Query(..., alias="token"),
) -> None:
    """Push signaling, messaging and notification events to one principal."""

    try:
        principal = decode_access_token(token)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await event_stream_manager.connect(principal.id, websocket)
    await websocket.send_text(json.dumps({"type": "ready"}))
    logger.info("Event socket connected for %s", principal.id)
    try:
        while True:
            try:
                raw = await websocket.receive_text()
            except WebSocketDisconnect:
                break
            if raw.strip().lower() == "ping":
                await websocket.send_text(json.dumps({"type": "pong"}))
    finally:
        await event_stream_manager.disconnect(websocket)
        logger.info("Event socket disconnected for %s", principal.id)


__all__ = ["router"]
