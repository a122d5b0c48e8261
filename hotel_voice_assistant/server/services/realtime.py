"""
Realtime Channel Service.

Keeps track of connected websocket clients and the rooms they joined, and
fans events out to them. Every client joins the staff room on connect;
guests additionally join the room of their order to receive
``order_status_update`` events.

Frames in both directions are JSON objects of the form
``{"event": <name>, "data": <payload>}``.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Set

from fastapi import WebSocket

from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.monitoring import log_realtime_event
from hotel_voice_assistant.server.core.constant import STAFF_ROOM

logger = get_logger(__name__)

MOBILE_USER_AGENT = re.compile(r"iPhone|iPad|iPod|Android|Mobile|webOS|BlackBerry", re.IGNORECASE)

_NO_DATA = object()


def detect_device_type(user_agent: str) -> str:
    """Classify a client as ``mobile`` or ``desktop`` from its User-Agent."""
    return "mobile" if MOBILE_USER_AGENT.search(user_agent or "") else "desktop"


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ConnectedClient:
    """A registered websocket connection."""

    id: str
    websocket: WebSocket
    device_type: str
    user_agent: str
    connected_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    rooms: Set[str] = field(default_factory=set)


class ConnectionManager:
    """Registry of websocket clients and room membership."""

    def __init__(self) -> None:
        self.clients: Dict[str, ConnectedClient] = {}

    @property
    def count(self) -> int:
        return len(self.clients)

    async def connect(self, websocket: WebSocket) -> ConnectedClient:
        """Accept a websocket, register it, put it in the staff room and announce the new client count."""
        await websocket.accept()
        user_agent = websocket.headers.get("user-agent", "")
        client = ConnectedClient(
            id=uuid.uuid4().hex,
            websocket=websocket,
            device_type=detect_device_type(user_agent),
            user_agent=user_agent,
        )
        client.rooms.add(STAFF_ROOM)
        self.clients[client.id] = client
        logger.info(f"Socket connected: {client.device_type} - {client.id[:6]} ({self.count} clients)")
        await self.broadcast("clients_count", self.count)
        return client

    async def disconnect(self, client_id: str) -> None:
        """Forget a client and announce the new client count."""
        await self._drop([client_id])

    async def _drop(self, client_ids: Iterable[str]) -> None:
        """Remove clients and, if any were registered, announce the new count to the rest."""
        removed = [client_id for client_id in client_ids if self.clients.pop(client_id, None) is not None]
        if not removed:
            return
        for client_id in removed:
            logger.info(f"Socket disconnected: {client_id[:6]} ({self.count} clients)")
        await self.broadcast("clients_count", self.count)

    def join(self, client_id: str, room: str) -> None:
        client = self.clients.get(client_id)
        if client is None:
            return
        client.rooms.add(room)
        logger.debug(f"Socket {client_id[:6]} joined room {room}")

    async def _deliver(self, client_id: str, event: str, data: Any) -> bool:
        client = self.clients.get(client_id)
        if client is None:
            return False
        try:
            await client.websocket.send_json({"event": event, "data": data})
            return True
        except Exception as e:
            logger.warning(f"Dropping socket {client_id[:6]} after send failure: {e}")
            return False

    async def send(self, client_id: str, event: str, data: Any) -> bool:
        """
        Send one event to one client.

        Returns:
            False if the client is unknown or the send failed; a failed client
            is dropped from the registry.
        """
        if await self._deliver(client_id, event, data):
            return True
        await self._drop([client_id])
        return False

    async def emit_to_room(self, room: str, event: str, data: Any) -> int:
        """
        Send an event to every client in ``room``.

        Returns:
            Number of clients that received it.
        """
        targets = [client_id for client_id, client in list(self.clients.items()) if room in client.rooms]
        return await self._fan_out(targets, event, data, room)

    async def broadcast(self, event: str, data: Any) -> int:
        """Send an event to every connected client."""
        return await self._fan_out(list(self.clients), event, data, "*")

    async def _fan_out(self, targets: List[str], event: str, data: Any, room: str) -> int:
        # Dead sockets are dropped after the loop.
        delivered = 0
        dead: List[str] = []
        for client_id in targets:
            if await self._deliver(client_id, event, data):
                delivered += 1
            elif client_id in self.clients:
                dead.append(client_id)
        log_realtime_event(event, room, delivered)
        await self._drop(dead)
        return delivered

    async def broadcast_staff_data_change(self, change_type: str, data: Any = _NO_DATA, **fields: Any) -> int:
        """
        Tell staff dashboards that something changed.

        Args:
            change_type: ``new_request``, ``status_update``, ``new_message``, ``call_summary``
            data: Payload attached under ``data``; omitted when not given, kept when ``None``
            **fields: Extra top-level fields (e.g. ``orderId``, ``status``)
        """
        payload: Dict[str, Any] = {"type": change_type, "timestamp": now_iso()}
        if data is not _NO_DATA:
            payload["data"] = data
        payload.update(fields)
        return await self.emit_to_room(STAFF_ROOM, "data_changed", payload)

    async def notify_order_status(self, order_id: str | int, status: str) -> int:
        """Push a status change to the guests watching an order."""
        return await self.emit_to_room(str(order_id), "order_status_update", {"orderId": str(order_id), "status": status})

    async def handle_message(self, client_id: str, message: Any) -> None:
        """
        Dispatch one inbound frame.

        Unknown events and malformed frames are answered with an ``error``
        event; the connection stays open.
        """
        if not isinstance(message, dict) or not isinstance(message.get("event"), str):
            await self.send(client_id, "error", {"message": "Malformed message; expected {event, data}"})
            return

        event: str = message["event"]
        data: Any = message.get("data")

        if event == "join_room":
            room = data if isinstance(data, (str, int)) else None
            if room is None or str(room) == "":
                await self.send(client_id, "error", {"message": "join_room requires a room id"})
                return
            self.join(client_id, str(room))
        elif event == "update_order_status":
            order_id, status = _order_status_fields(data)
            if order_id is None or status is None:
                await self.send(client_id, "error", {"message": "update_order_status requires orderId and status"})
                return
            logger.info(f"Received status update for order {order_id}: {status}")
            await self.notify_order_status(order_id, status)
            await self.broadcast_staff_data_change("status_update", orderId=order_id, status=status)
        elif event == "new_request":
            logger.info(f"New request received from {client_id[:6]}")
            await self.broadcast_staff_data_change("new_request", data)
        elif event == "ping":
            await self.send(client_id, "pong", {"time": now_iso(), "clients": self.count})
        else:
            await self.send(client_id, "error", {"message": f"Unknown event '{event}'"})


def _order_status_fields(data: Any) -> tuple[Optional[str], Optional[str]]:
    if not isinstance(data, dict):
        return None, None
    order_id = data.get("orderId")
    status = data.get("status")
    if order_id is None or not isinstance(status, str) or not status:
        return None, None
    return str(order_id), status


manager = ConnectionManager()


def get_connection_manager() -> ConnectionManager:
    """Dependency returning the process-wide connection manager."""
    return manager
