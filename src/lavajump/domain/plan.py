from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence

from lavajump.domain.actors import Actor, ActorType
from lavajump.domain.behaviors import ActFn
from lavajump.domain.cells import CellKind
from lavajump.domain.config import DEFAULT_CONFIG, SimulationConfig
from lavajump.domain.exceptions import InvalidLevelPlan
from lavajump.domain.glyphs import DEFAULT_GLYPHS, GlyphTable
from lavajump.domain.level import Level
from lavajump.domain.rng import RandomSource
from lavajump.domain.vector import Vector

logger = logging.getLogger(__name__)


def plan_from_text(text: str) -> tuple[str, ...]:
    """
    Split a multi-line plan. One empty line at each end is dropped so a
    triple-quoted string can be used directly; rows of spaces are kept.
    """
    rows = text.split("\n")
    if rows and rows[0] == "":
        rows = rows[1:]
    if rows and rows[-1] == "":
        rows = rows[:-1]
    return tuple(rows)


def parse_plan(
    plan: Sequence[str] | str,
    *,
    glyphs: GlyphTable = DEFAULT_GLYPHS,
    rng: RandomSource | None = None,
    config: SimulationConfig = DEFAULT_CONFIG,
    behaviors: Mapping[ActorType, ActFn] | None = None,
) -> Level:
    """
    Build a level from its plan: one string per row, all the same length.

    Every character becomes either a grid cell or an actor on an empty cell.
    Actors are listed in row-major scan order. Exactly one player is required.
    """
    rows = plan_from_text(plan) if isinstance(plan, str) else tuple(plan)
    if not rows:
        raise InvalidLevelPlan("plan has no rows")

    first = rows[0]
    if not isinstance(first, str) or not first:
        raise InvalidLevelPlan("row 0 must be a non-empty string")
    width = len(first)

    rng = rng if rng is not None else random.Random()

    grid: list[tuple[CellKind, ...]] = []
    actors: list[Actor] = []
    player_cells: list[tuple[int, int]] = []

    for y, row in enumerate(rows):
        if not isinstance(row, str):
            raise InvalidLevelPlan(f"row {y} must be a string")
        if len(row) != width:
            raise InvalidLevelPlan(f"row {y} has length {len(row)}, expected {width}")

        line: list[CellKind] = []
        for x, ch in enumerate(row):
            glyph = glyphs.lookup(ch)
            if glyph is None:
                raise InvalidLevelPlan(f"row {y}, column {x}: unknown glyph {ch!r}")

            if glyph.actor is not None:
                actor = glyph.actor(Vector(float(x), float(y)), rng, config)
                if actor.type is ActorType.PLAYER:
                    player_cells.append((y, x))
                actors.append(actor)
            line.append(glyph.cell)
        grid.append(tuple(line))

    if not player_cells:
        raise InvalidLevelPlan("plan has no player glyph")
    if len(player_cells) > 1:
        where = ", ".join(f"row {y} column {x}" for y, x in player_cells)
        raise InvalidLevelPlan(f"plan has {len(player_cells)} players ({where}); exactly one is allowed")

    level = Level(tuple(grid), actors, config=config, behaviors=behaviors)
    logger.debug(
        "built %dx%d level: %d actors, %d coins",
        level.width, level.height, len(level.actors), level.coins_left(),
    )
    return level
