from __future__ import annotations

from enum import Enum


class CellKind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    LAVA = "lava"


Grid = tuple[tuple[CellKind, ...], ...]
