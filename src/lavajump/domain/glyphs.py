from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from lavajump.domain.actors import Actor, HazardKind, make_coin, make_lava, make_player
from lavajump.domain.cells import CellKind
from lavajump.domain.config import SimulationConfig
from lavajump.domain.rng import RandomSource
from lavajump.domain.vector import Vector


# Bump when an existing glyph changes meaning. Adding glyphs keeps the version.
PLAN_FORMAT_VERSION = 1

ActorFactory = Callable[[Vector, RandomSource, SimulationConfig], Actor]


@dataclass(frozen=True)
class Glyph:
    """
    What one plan character produces: a grid cell, or an actor standing on
    an empty cell.
    """
    cell: CellKind = CellKind.EMPTY
    actor: ActorFactory | None = None

    def __post_init__(self) -> None:
        if self.actor is not None and self.cell is not CellKind.EMPTY:
            raise ValueError("actor glyphs must leave an empty cell")


@dataclass(frozen=True)
class GlyphTable:
    entries: Mapping[str, Glyph] = field(default_factory=dict)
    version: int = PLAN_FORMAT_VERSION

    def __post_init__(self) -> None:
        for ch in self.entries:
            if len(ch) != 1:
                raise ValueError(f"glyph keys must be single characters, got {ch!r}")
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, ch: object) -> bool:
        return ch in self.entries

    def lookup(self, ch: str) -> Glyph | None:
        return self.entries.get(ch)

    def extended(self, extra: Mapping[str, Glyph]) -> GlyphTable:
        """Return a table with `extra` glyphs added. Existing glyphs cannot be redefined."""
        for ch, glyph in extra.items():
            current = self.entries.get(ch)
            if current is not None and current != glyph:
                raise ValueError(f"glyph {ch!r} is already defined")
        return GlyphTable(entries={**self.entries, **extra}, version=self.version)


def _player(pos: Vector, _rng: RandomSource, _config: SimulationConfig) -> Actor:
    return make_player(pos)


def _coin(pos: Vector, rng: RandomSource, _config: SimulationConfig) -> Actor:
    return make_coin(pos, rng)


def lava_factory(kind: HazardKind) -> ActorFactory:
    def _lava(pos: Vector, _rng: RandomSource, config: SimulationConfig) -> Actor:
        return make_lava(pos, kind, config)
    return _lava


DEFAULT_GLYPHS = GlyphTable(
    entries={
        " ": Glyph(),
        "x": Glyph(cell=CellKind.WALL),
        "!": Glyph(cell=CellKind.LAVA),
        "=": Glyph(actor=lava_factory(HazardKind.HORIZONTAL)),
        "|": Glyph(actor=lava_factory(HazardKind.VERTICAL)),
        "v": Glyph(actor=lava_factory(HazardKind.DRIPPING)),
        "o": Glyph(actor=_coin),
        "@": Glyph(actor=_player),
    }
)
