from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives one update + render per frame from the Tk event loop, passing the
    wall-clock time since the previous frame to `update_fn`.
    """

    def __init__(
        self,
        *,
        root: tk.Tk,
        update_fn: Callable[[float], None],
        render_fn: Callable[[], None],
        fps: int = 60,
        max_dt: float = 0.1,
    ) -> None:
        self._root = root
        self._update_fn = update_fn
        self._render_fn = render_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))
        self._max_dt = max_dt

        self._running = False
        self._after_id: str | None = None
        self._last_t = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_t = time.monotonic()
        logger.debug("game loop started at %d ms/frame", self._target_ms)
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None
        logger.debug("game loop stopped")

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        now = time.monotonic()
        dt = now - self._last_t
        self._last_t = now

        # Clamp so a stalled window does not replay seconds of physics at once.
        if dt > self._max_dt:
            dt = self._max_dt

        try:
            self._update_fn(dt)
            self._render_fn()
        except Exception:
            logger.exception("frame failed; stopping game loop")
            self.stop()
            raise

        # update_fn may have stopped us.
        if self._running:
            self._schedule_next()
