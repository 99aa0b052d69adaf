"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from arcade_snake.engine import GameSnapshot
from arcade_snake.server.session_manager import SessionManager
from arcade_snake.snake import Direction

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _encode(snapshot: GameSnapshot) -> str:
    return json.dumps(snapshot.to_dict(), separators=(",", ":"))


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Send inputs, receive a snapshot after every tick and input.

    Accepted messages are ``{"direction": "up"}`` and
    ``{"action": "pause"}`` / ``{"action": "reset"}``. Anything else is
    ignored.
    """
    entry = _get_manager(websocket).get_session(session_id)
    if entry is None:
        await websocket.close(code=4004, reason="Session not found.")
        return
    session = entry.session

    await websocket.accept()
    logger.info("Client connected to session %s.", session_id)

    async def push(snapshot: GameSnapshot) -> None:
        if websocket.client_state == WebSocketState.CONNECTED:
            await websocket.send_text(_encode(snapshot))

    # Send initial state snapshot so the client can draw immediately.
    await websocket.send_text(_encode(await session.snapshot()))
    session.add_listener(push)

    try:
        while True:
            raw = await websocket.receive_text()
            if session.closed:
                # Deleted or evicted while this socket stayed open.
                await websocket.close(code=4004, reason="Session closed.")
                logger.info("Closed socket for removed session %s.", session_id)
                return
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            entry.touch()
            if "direction" in msg:
                direction = Direction.parse(msg["direction"])
                if direction is not None:
                    await session.set_direction(direction)
                continue

            action = msg.get("action")
            if action == "pause":
                await session.toggle_pause()
            elif action == "reset":
                await session.reset()
    except WebSocketDisconnect:
        logger.info("Client disconnected from session %s.", session_id)
    finally:
        session.remove_listener(push)
