from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A point, a size or a velocity in grid cells."""
    x: float
    y: float

    def plus(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def times(self, factor: float | Vector) -> Vector:
        # A vector factor scales per axis (speed * step, size * 0.5, ...)
        if isinstance(factor, Vector):
            return Vector(self.x * factor.x, self.y * factor.y)
        return Vector(self.x * factor, self.y * factor)


ZERO = Vector(0.0, 0.0)
