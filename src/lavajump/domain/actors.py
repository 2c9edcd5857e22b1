from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from lavajump.domain.config import SimulationConfig
from lavajump.domain.rng import RandomSource
from lavajump.domain.vector import ZERO, Vector


class ActorType(Enum):
    PLAYER = "player"
    COIN = "coin"
    LAVA = "lava"


class HazardKind(Enum):
    STATIC = "static"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DRIPPING = "dripping"  # falls, then restarts from repeat_pos


PLAYER_SIZE = Vector(0.8, 1.5)
PLAYER_OFFSET = Vector(0.0, -0.5)
COIN_SIZE = Vector(0.6, 0.6)
COIN_OFFSET = Vector(0.2, 0.1)
LAVA_SIZE = Vector(1.0, 1.0)


@dataclass(eq=False)
class Actor:
    """
    One dynamic entity of the level. `type` selects which of the optional
    fields are meaningful:

      player: speed
      lava:   speed, hazard, repeat_pos (dripping only)
      coin:   base_pos, wobble

    Actors compare by identity; the level relies on that to skip "self" in
    overlap queries and to remove collected coins.
    """
    type: ActorType
    pos: Vector
    size: Vector
    speed: Vector = ZERO
    hazard: HazardKind | None = None
    repeat_pos: Vector | None = None
    base_pos: Vector | None = None
    wobble: float = 0.0

    @property
    def center(self) -> Vector:
        return self.pos.plus(self.size.times(0.5))


def make_player(pos: Vector) -> Actor:
    return Actor(type=ActorType.PLAYER, pos=pos.plus(PLAYER_OFFSET), size=PLAYER_SIZE)


def make_coin(pos: Vector, rng: RandomSource) -> Actor:
    base = pos.plus(COIN_OFFSET)
    # Random phase keeps coins from bobbing in lockstep.
    return Actor(
        type=ActorType.COIN,
        pos=base,
        size=COIN_SIZE,
        base_pos=base,
        wobble=rng.random() * math.pi * 2,
    )


def make_lava(pos: Vector, kind: HazardKind, config: SimulationConfig) -> Actor:
    if kind is HazardKind.HORIZONTAL:
        speed = Vector(config.horizontal_lava_speed, 0.0)
    elif kind is HazardKind.VERTICAL:
        speed = Vector(0.0, config.vertical_lava_speed)
    elif kind is HazardKind.DRIPPING:
        speed = Vector(0.0, config.dripping_lava_speed)
    else:
        speed = ZERO

    return Actor(
        type=ActorType.LAVA,
        pos=pos,
        size=LAVA_SIZE,
        speed=speed,
        hazard=kind,
        repeat_pos=pos if kind is HazardKind.DRIPPING else None,
    )
