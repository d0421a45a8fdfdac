"""Per-principal WebSocket fanout used as the optional push channel."""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Iterable

from fastapi import WebSocket

from ..config import get_settings

logger = logging.getLogger(__name__)


class EventStreamManager:
    """Tracks per-principal WebSocket connections and broadcasts payloads."""

    def __init__(self) -> None:
        self._channels: dict[str, set[WebSocket]] = {}
        self._connections: dict[WebSocket, str] = {}
        self._lock = asyncio.Lock()

    async def connect(self, principal_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            group = self._channels.setdefault(principal_id, set())
            group.add(websocket)
            self._connections[websocket] = principal_id

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            principal_id = self._connections.pop(websocket, None)
            if not principal_id:
                return
            group = self._channels.get(principal_id)
            if group is None:
                return
            group.discard(websocket)
            if not group:
                self._channels.pop(principal_id, None)

    async def broadcast(self, principals: str | Iterable[str], payload: dict[str, Any]) -> None:
        if not principals:
            return
        if isinstance(principals, str):
            target_ids = [principals]
        else:
            target_ids = list(dict.fromkeys(item for item in principals if item))
        if not target_ids:
            return
        serialized = json.dumps(payload, default=str)
        async with self._lock:
            targets: list[WebSocket] = []
            for principal_id in target_ids:
                targets.extend(self._channels.get(principal_id, ()))
        for ws in targets:
            try:
                await ws.send_text(serialized)
            except Exception:
                logger.warning("Dropping event socket after failed send")
                await self.disconnect(ws)


event_stream_manager = EventStreamManager()


def publish_event(principals: str | Iterable[str], payload: dict[str, Any]) -> None:
    """Schedule a push to the given principals; a no-op outside an event loop."""

    if not get_settings().realtime_enabled:
        return
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return
    targets = [principals] if isinstance(principals, str) else list(principals)
    loop.create_task(event_stream_manager.broadcast(targets, payload))


__all__ = ["EventStreamManager", "event_stream_manager", "publish_event"]
