"""Broadcast lesson table updates to clients connected over WebSockets."""
from __future__ import annotations

import json
import logging
from typing import Set

from fastapi import WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)

UPDATE_EVENT = "update"


class WebSocketEventNotifier:
    """Keep track of connected WebSockets and push update signals to them."""

    def __init__(self) -> None:
        self._connections: Set[WebSocket] = set()

    @property
    def connection_count(self) -> int:
        """Return the number of currently registered clients."""

        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        """Complete the handshake of ``websocket`` and register it for broadcasts."""

        await websocket.accept()
        self._connections.add(websocket)
        logger.info("Client connected, %d active", len(self._connections))

    def disconnect(self, websocket: WebSocket) -> None:
        """Forget ``websocket`` if it is registered."""

        if websocket in self._connections:
            self._connections.discard(websocket)
            logger.info("Client disconnected, %d active", len(self._connections))

    async def notify_all_clients_about_update(self) -> None:
        """Send the update signal to every registered client."""

        message = json.dumps({"event": UPDATE_EVENT})
        disconnected: Set[WebSocket] = set()
        for websocket in self._connections.copy():
            try:
                await websocket.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(websocket)
            except RuntimeError as error:
                logger.warning("Failed to notify client: %s", error)
                disconnected.add(websocket)

        for websocket in disconnected:
            self.disconnect(websocket)
        logger.debug("Update broadcast to %d clients", len(self._connections))
