from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping

from lavajump.domain.actors import Actor, ActorType
from lavajump.domain.behaviors import ACT, ActFn
from lavajump.domain.cells import CellKind, Grid
from lavajump.domain.config import DEFAULT_CONFIG, SimulationConfig
from lavajump.domain.exceptions import InvalidLevelPlan, OutOfBoundsQuery
from lavajump.domain.input_state import NO_INPUT, InputIntent
from lavajump.domain.snapshot import ActorView, LevelSnapshot, Status
from lavajump.domain.vector import Vector

logger = logging.getLogger(__name__)

# Leftover step below this is float noise from repeated subtraction, not time.
_STEP_EPSILON = 1e-9


class Level:
    """
    The simulation: a static grid plus the actors moving over it.

    The grid never changes. Actors are updated in place by animate(), in list
    order; collected coins are removed from the list.
    """

    def __init__(
        self,
        grid: Grid,
        actors: Iterable[Actor],
        *,
        config: SimulationConfig = DEFAULT_CONFIG,
        behaviors: Mapping[ActorType, ActFn] | None = None,
    ) -> None:
        if not grid or not grid[0]:
            raise InvalidLevelPlan("level grid must not be empty")
        self.grid = grid
        self.height = len(grid)
        self.width = len(grid[0])
        if any(len(row) != self.width for row in grid):
            raise InvalidLevelPlan("level grid rows must have equal length")

        self.actors: list[Actor] = list(actors)
        players = [a for a in self.actors if a.type is ActorType.PLAYER]
        if len(players) != 1:
            raise InvalidLevelPlan(f"level needs exactly one player, got {len(players)}")
        self.player = players[0]

        self.config = config
        self._behaviors = behaviors if behaviors is not None else ACT

        self.status: Status | None = None
        self.finish_delay: float | None = None  # set with status

    # ---------- Queries ----------

    def cell_at(self, x: int, y: int) -> CellKind:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise OutOfBoundsQuery(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.grid[y][x]

    def obstacle_at(self, pos: Vector, size: Vector) -> CellKind | None:
        """
        First non-empty cell kind under the rectangle, scanning row-major.

        Leaving the grid sideways or through the top counts as a wall, leaving
        it through the bottom counts as lava. None means the rectangle is free.
        """
        x_start = math.floor(pos.x)
        x_end = math.ceil(pos.x + size.x)
        y_start = math.floor(pos.y)
        y_end = math.ceil(pos.y + size.y)

        if x_start < 0 or x_end > self.width or y_start < 0:
            return CellKind.WALL
        if y_end > self.height:
            return CellKind.LAVA

        for y in range(y_start, y_end):
            for x in range(x_start, x_end):
                kind = self.cell_at(x, y)
                if kind is not CellKind.EMPTY:
                    return kind
        return None

    def actor_at(self, actor: Actor) -> Actor | None:
        """First other actor whose box strictly overlaps `actor`'s box, in list order."""
        for other in self.actors:
            if (
                other is not actor
                and actor.pos.x + actor.size.x > other.pos.x
                and actor.pos.x < other.pos.x + other.size.x
                and actor.pos.y + actor.size.y > other.pos.y
                and actor.pos.y < other.pos.y + other.size.y
            ):
                return other
        return None

    def coins_left(self) -> int:
        return sum(1 for a in self.actors if a.type is ActorType.COIN)

    def is_finished(self) -> bool:
        return self.status is not None and self.finish_delay is not None and self.finish_delay < 0

    def snapshot(self) -> LevelSnapshot:
        return LevelSnapshot(
            width=self.width,
            height=self.height,
            grid=self.grid,
            actors=tuple(ActorView.of(a) for a in self.actors),
            status=self.status,
            coins_left=self.coins_left(),
        )

    # ---------- Simulation ----------

    def animate(self, step: float, intent: InputIntent = NO_INPUT) -> None:
        """
        Advance the level by `step` seconds, in sub-steps no longer than
        config.max_step. `intent` is held constant for the whole call.
        """
        if step < 0:
            raise ValueError("step must be >= 0")

        if self.status is not None:
            assert self.finish_delay is not None
            self.finish_delay -= step

        max_step = self.config.max_step
        while step > _STEP_EPSILON:
            this_step = min(step, max_step)
            # Copy: a coin collected mid-sub-step leaves the live list.
            for actor in list(self.actors):
                self._behaviors[actor.type](actor, this_step, self, intent)
            step -= this_step

    def player_touched(self, kind: CellKind | ActorType, actor: Actor | None = None) -> None:
        """Called by the player's behavior when it bumps into a cell or an actor."""
        if kind is CellKind.LAVA or kind is ActorType.LAVA:
            self._finish(Status.LOST)
        elif kind is ActorType.COIN and actor is not None:
            if actor in self.actors:
                self.actors.remove(actor)
            if self.coins_left() == 0:
                self._finish(Status.WON)

    def _finish(self, status: Status) -> None:
        # First outcome sticks; later touches must not restart the countdown.
        if self.status is not None:
            return
        self.status = status
        self.finish_delay = self.config.finish_delay
        logger.info("level %s; finishing in %.2fs", status.value, self.finish_delay)
