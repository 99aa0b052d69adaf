"""Asyncio tick scheduler driving a single :class:`GameEngine`."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

from arcade_snake.config import GameConfig
from arcade_snake.engine import GameEngine, GameSnapshot
from arcade_snake.snake import Direction

logger = logging.getLogger(__name__)

Listener = Callable[[GameSnapshot], Awaitable[None] | None]


class GameSession:
    """Runs one game on the event loop.

    A tick task is armed only while the game is running. It sleeps for
    the engine's current speed, ticks, notifies listeners, and re-arms
    itself; when a tick changes the speed the timer is cancelled and
    scheduled again at the new interval. Pausing, game over and
    :meth:`reset` all cancel the timer before touching the engine, so a
    stale tick can never land on fresh state.

    Every mutation is serialized through ``lock`` and every resulting
    snapshot is pushed to the registered listeners.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        engine: GameEngine | None = None,
    ) -> None:
        self.engine = engine if engine is not None else GameEngine(config)
        self.lock = asyncio.Lock()
        self._listeners: list[Listener] = []
        self._task: asyncio.Task | None = None
        self._armed_speed: int | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def _notify(self, snapshot: GameSnapshot) -> None:
        for listener in list(self._listeners):
            try:
                result = listener(snapshot)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Snapshot listener failed; removing it.")
                self.remove_listener(listener)

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        """Whether a tick is currently scheduled."""
        return self._task is not None and not self._task.done()

    @property
    def armed_speed(self) -> int | None:
        """Interval in ms the current timer was armed with."""
        return self._armed_speed if self.running else None

    def _arm(self) -> None:
        """Cancel any scheduled tick and schedule one at the current speed."""
        self._disarm()
        if self._closed:
            return
        self._armed_speed = self.engine.speed
        self._task = asyncio.create_task(self._tick_after(self.engine.speed))

    def _disarm(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._armed_speed = None

    def _sync_timer(self) -> None:
        """Make the timer match the engine: armed iff running."""
        engine = self.engine
        if engine.is_over or engine.is_paused:
            self._disarm()
        elif not self.running:
            self._arm()

    async def _tick_after(self, interval_ms: int) -> None:
        try:
            while True:
                await asyncio.sleep(interval_ms / 1000.0)
                async with self.lock:
                    snapshot = self.engine.tick()
                    await self._notify(snapshot)
                    if snapshot.is_over or snapshot.is_paused:
                        self._task = None
                        self._armed_speed = None
                        return
                    if snapshot.speed != interval_ms:
                        logger.debug(
                            "Re-arming tick timer: %dms -> %dms.",
                            interval_ms, snapshot.speed,
                        )
                        # Hand over to a fresh timer; this one just ends.
                        self._task = None
                        self._arm()
                        return
        except asyncio.CancelledError:
            logger.debug("Tick timer cancelled.")
            raise

    # ------------------------------------------------------------------
    # Input commands
    # ------------------------------------------------------------------

    async def snapshot(self) -> GameSnapshot:
        async with self.lock:
            return self.engine.snapshot()

    async def set_direction(self, direction: Direction) -> GameSnapshot:
        async with self.lock:
            if self._closed:
                return self.engine.snapshot()
            snapshot = self.engine.set_direction(direction)
            self._sync_timer()
            await self._notify(snapshot)
            return snapshot

    async def toggle_pause(self) -> GameSnapshot:
        async with self.lock:
            if self._closed:
                return self.engine.snapshot()
            snapshot = self.engine.toggle_pause()
            self._sync_timer()
            await self._notify(snapshot)
            return snapshot

    async def reset(self) -> GameSnapshot:
        async with self.lock:
            if self._closed:
                return self.engine.snapshot()
            self._disarm()
            snapshot = self.engine.reset()
            await self._notify(snapshot)
            return snapshot

    async def close(self) -> None:
        """Cancel the tick timer for good; later input is ignored."""
        self._closed = True
        task = self._task
        self._disarm()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
        self._listeners.clear()
