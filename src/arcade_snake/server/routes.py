"""REST API route handlers for session lifecycle and input."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from arcade_snake.config import GameConfig
from arcade_snake.server.models import (
    CreateSessionRequest,
    DirectionRequest,
    SessionSummary,
)
from arcade_snake.server.session_manager import (
    SessionEntry,
    SessionLimitError,
    SessionManager,
)
from arcade_snake.snake import Direction

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def _get_entry(request: Request, session_id: str) -> SessionEntry:
    entry = _get_manager(request).get_session(session_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return entry


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new paused game session."""
    try:
        config = GameConfig(
            seed=body.seed,
            initial_speed_ms=body.initial_speed_ms,
            min_speed_ms=body.min_speed_ms,
            speed_decrement_ms=body.speed_decrement_ms,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    try:
        entry = await _get_manager(request).create_session(config)
    except SessionLimitError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return entry.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List all sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get the current snapshot of a session."""
    entry = _get_entry(request, session_id)
    snapshot = await entry.session.snapshot()
    return snapshot.to_dict()


@router.post("/{session_id}/direction")
async def set_direction(
    session_id: str, body: DirectionRequest, request: Request,
) -> dict:
    """Queue a direction change; the first one also starts play."""
    entry = _get_entry(request, session_id)
    direction = Direction.parse(body.direction)
    if direction is None:
        raise HTTPException(
            status_code=422, detail=f"Unknown direction {body.direction!r}.",
        )
    snapshot = await entry.session.set_direction(direction)
    return snapshot.to_dict()


@router.post("/{session_id}/pause")
async def toggle_pause(session_id: str, request: Request) -> dict:
    """Pause or resume the session."""
    entry = _get_entry(request, session_id)
    snapshot = await entry.session.toggle_pause()
    return snapshot.to_dict()


@router.post("/{session_id}/reset")
async def reset(session_id: str, request: Request) -> dict:
    """Start a fresh game in the same session."""
    entry = _get_entry(request, session_id)
    snapshot = await entry.session.reset()
    return snapshot.to_dict()


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, request: Request) -> Response:
    """Stop and remove a session."""
    if not await _get_manager(request).delete_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found.")
    return Response(status_code=204)
