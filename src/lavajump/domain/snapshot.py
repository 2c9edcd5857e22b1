from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lavajump.domain.actors import Actor, ActorType, HazardKind
from lavajump.domain.cells import Grid
from lavajump.domain.vector import Vector


class Status(Enum):
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class ActorView:
    type: ActorType
    pos: Vector
    size: Vector
    hazard: HazardKind | None = None

    @classmethod
    def of(cls, actor: Actor) -> ActorView:
        return cls(type=actor.type, pos=actor.pos, size=actor.size, hazard=actor.hazard)


@dataclass(frozen=True)
class LevelSnapshot:
    """
    What a renderer may read once per frame. Built fresh by Level.snapshot();
    nothing in it aliases mutable level state.
    """
    width: int
    height: int
    grid: Grid
    actors: tuple[ActorView, ...]  # level order = draw order
    status: Status | None
    coins_left: int

    @property
    def player(self) -> ActorView:
        for a in self.actors:
            if a.type is ActorType.PLAYER:
                return a
        raise LookupError("snapshot has no player")
