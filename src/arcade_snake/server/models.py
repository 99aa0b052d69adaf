"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from arcade_snake.engine import GameStatus


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    seed: int | None = None
    initial_speed_ms: int = Field(default=200, ge=50, le=2000)
    min_speed_ms: int = Field(default=50, ge=10, le=2000)
    speed_decrement_ms: int = Field(default=5, ge=0, le=100)


class DirectionRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/direction."""

    direction: str = Field(min_length=1, max_length=16)


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    status: GameStatus
    score: int
    speed: int
