"""Immutable two-dimensional vector of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector2d:
    """A 2D vector supporting addition, subtraction and scalar scaling."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2d) -> Vector2d:
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2d) -> Vector2d:
        return Vector2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2d:
        return Vector2d(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2d:
        return Vector2d(self.x / scalar, self.y / scalar)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Out of bounds access to Vector2d")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean norm of the vector."""
        return math.hypot(self.x, self.y)