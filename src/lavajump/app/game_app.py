from __future__ import annotations

import logging
import random
import tkinter as tk
from collections.abc import Sequence

from lavajump.app.game_loop import GameLoop
from lavajump.domain.config import DEFAULT_CONFIG, SimulationConfig
from lavajump.domain.level import Level
from lavajump.domain.plan import parse_plan
from lavajump.domain.rng import RandomSource
from lavajump.domain.snapshot import Status
from lavajump.ui.input_mapper import TkInputMapper
from lavajump.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    """
    Plays one level: restarts it after a loss, stops the loop after a win.
    """

    def __init__(
        self,
        plan: Sequence[str],
        *,
        scale: int = 20,
        width: int = 600,
        height: int = 450,
        fps: int = 60,
        rng: RandomSource | None = None,
        config: SimulationConfig = DEFAULT_CONFIG,
    ) -> None:
        self._plan = tuple(plan)
        self._config = config
        self.rng = rng if rng is not None else random.Random()

        # Parse before opening a window so a bad plan fails cleanly.
        self.level = self._new_level()
        self.attempts = 1

        self.root = tk.Tk()
        self.root.title("Lava Jump")

        self.input = TkInputMapper(self.root)
        self.view = TkCanvasView(self.root, width=width, height=height, scale=scale)
        self.view.show_level(self.level.snapshot())

        self.loop = GameLoop(
            root=self.root,
            update_fn=self._update,
            render_fn=self._render,
            fps=fps,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        logger.info("starting %dx%d level", self.level.width, self.level.height)
        self.loop.start()
        self.root.mainloop()

    def _new_level(self) -> Level:
        return parse_plan(self._plan, rng=self.rng, config=self._config)

    # ---------- Game loop ----------

    def _update(self, dt: float) -> None:
        # Input is sampled once per frame and held for every sub-step.
        self.level.animate(dt, self.input.sample())
        if not self.level.is_finished():
            return

        if self.level.status is Status.LOST:
            self.attempts += 1
            logger.info("player lost; restarting (attempt %d)", self.attempts)
            self.level = self._new_level()
            self.view.show_level(self.level.snapshot())
        else:
            logger.info("player won after %d attempt(s)", self.attempts)
            self.loop.stop()

    def _render(self) -> None:
        self.view.render(self.level.snapshot())

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
