"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from arcade_snake.server.routes import router
from arcade_snake.server.session_manager import DEFAULT_MAX_SESSIONS, SessionManager
from arcade_snake.server.websocket import ws_router

logger = logging.getLogger(__name__)


def create_app(max_sessions: int = DEFAULT_MAX_SESSIONS) -> FastAPI:
    """Build the API around a fresh session registry.

    The registry lives for the lifetime of the app; every session's tick
    timer is cancelled on shutdown.
    """

    @asynccontextmanager
    async def session_registry(app: FastAPI):
        manager = SessionManager(max_sessions=max_sessions)
        app.state.session_manager = manager
        logger.info("Session registry ready (max %d sessions).", max_sessions)
        try:
            yield
        finally:
            logger.info("Shutting down %d session(s).", len(manager))
            await manager.cleanup()

    app = FastAPI(
        title="Arcade Snake API", version="0.1.0", lifespan=session_registry,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
