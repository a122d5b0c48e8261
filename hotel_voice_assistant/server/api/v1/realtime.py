"""
Realtime WebSocket Endpoint.

Staff dashboards and guest clients connect here to receive order status
changes and dashboard updates. Frames are JSON ``{"event", "data"}``
objects in both directions.
"""

import json

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.server.services.deps import ConnectionManagerDep

logger = get_logger(__name__)
router = APIRouter()


@router.websocket("/ws")
async def realtime_socket(websocket: WebSocket, manager: ConnectionManagerDep):
    client = await manager.connect(websocket)
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except ValueError:
                await manager.send(client.id, "error", {"message": "Malformed JSON"})
                continue
            await manager.handle_message(client.id, message)
    except WebSocketDisconnect:
        logger.debug(f"Socket {client.id[:6]} closed by peer")
    finally:
        await manager.disconnect(client.id)
