"""In-memory registry of running game sessions."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field

from arcade_snake.config import GameConfig
from arcade_snake.engine import GameStatus
from arcade_snake.server.models import SessionSummary
from arcade_snake.session import GameSession

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 100


@dataclass
class SessionEntry:
    """A registered session and its bookkeeping."""

    session_id: str
    session: GameSession
    created_at: float = field(default_factory=time.monotonic)
    last_active: float = field(default_factory=time.monotonic)

    def touch(self) -> None:
        self.last_active = time.monotonic()

    def summary(self) -> SessionSummary:
        snapshot = self.session.engine.snapshot()
        return SessionSummary(
            session_id=self.session_id,
            status=snapshot.status,
            score=snapshot.score,
            speed=snapshot.speed,
        )


class SessionLimitError(RuntimeError):
    """Raised when the registry is full of unfinished games."""


class SessionManager:
    """Central registry managing all game sessions.

    Each session is an independent single-player game. When the registry
    is full, the longest-idle finished game is evicted to make room; if
    no game has finished, creation is refused.
    """

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1.")
        self._sessions: dict[str, SessionEntry] = {}
        self._max_sessions = max_sessions

    def __len__(self) -> int:
        return len(self._sessions)

    async def create_session(self, config: GameConfig) -> SessionEntry:
        """Register a new paused session and return its entry."""
        await self._evict_if_full()
        session_id = uuid.uuid4().hex[:12]
        entry = SessionEntry(session_id=session_id, session=GameSession(config))
        self._sessions[session_id] = entry
        logger.info("Session %s created.", session_id)
        return entry

    def get_session(self, session_id: str) -> SessionEntry | None:
        entry = self._sessions.get(session_id)
        if entry is not None:
            entry.touch()
        return entry

    def list_sessions(self) -> list[SessionSummary]:
        return [entry.summary() for entry in self._sessions.values()]

    async def delete_session(self, session_id: str) -> bool:
        """Close and forget a session. Returns True if it existed."""
        entry = self._sessions.pop(session_id, None)
        if entry is None:
            return False
        await entry.session.close()
        logger.info("Session %s deleted.", session_id)
        return True

    async def _evict_if_full(self) -> None:
        if len(self._sessions) < self._max_sessions:
            return
        finished = [
            e for e in self._sessions.values()
            if e.session.engine.status == GameStatus.OVER
        ]
        if not finished:
            raise SessionLimitError(
                f"All {self._max_sessions} sessions are still in play.",
            )
        stale = min(finished, key=lambda e: e.last_active)
        await self.delete_session(stale.session_id)
        logger.info(
            "Evicted finished session %s (retaining up to %d).",
            stale.session_id, self._max_sessions,
        )

    async def cleanup(self) -> None:
        """Cancel all tick timers and drop every session."""
        for session_id in list(self._sessions):
            await self.delete_session(session_id)
        logger.info("SessionManager cleanup complete.")
