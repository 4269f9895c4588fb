"""Axis-aligned bounding boxes used for plotting and spatial subdivision."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gravisim.vector2d import Vector2d

_EPSILON = 1e-10


@dataclass
class BoundingBox:
    """Rectangle given by its x and y extents (inclusive)."""

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0

    def contains(self, position: Vector2d) -> bool:
        """Whether the position lies inside or on the border of the box."""
        return (
            self.x_min <= position[0] <= self.x_max
            and self.y_min <= position[1] <= self.y_max
        )

    def quadrant(self, quadrant_id: int) -> BoundingBox:
        """Return one quarter: 0 upper-left, 1 upper-right, 2 lower-left, 3 lower-right."""
        x_mid = self.x_min + (self.x_max - self.x_min) / 2
        y_mid = self.y_min + (self.y_max - self.y_min) / 2
        if quadrant_id == 0:
            return BoundingBox(self.x_min, x_mid, y_mid, self.y_max)
        if quadrant_id == 1:
            return BoundingBox(x_mid, self.x_max, y_mid, self.y_max)
        if quadrant_id == 2:
            return BoundingBox(self.x_min, x_mid, self.y_min, y_mid)
        if quadrant_id == 3:
            return BoundingBox(x_mid, self.x_max, self.y_min, y_mid)
        raise ValueError("invalid quadrant id")

    def diagonal(self) -> float:
        """Length of the diagonal, never less than 1.0."""
        return max(1.0, math.hypot(self.x_max - self.x_min, self.y_max - self.y_min))

    def plotting_sanity_check(self) -> None:
        """Inflate a degenerate box into a square; fail if both sides are empty."""
        x_size = abs(self.x_max - self.x_min)
        y_size = abs(self.y_max - self.y_min)

        if x_size < _EPSILON and y_size > _EPSILON:
            self.x_min -= y_size / 2
            self.x_max += y_size / 2
            x_size = abs(self.x_max - self.x_min)
        if y_size < _EPSILON and x_size > _EPSILON:
            self.y_min -= x_size / 2
            self.y_max += x_size / 2
        if x_size < _EPSILON and y_size < _EPSILON:
            raise ValueError(
                "x and y size of bounding box are 0, thus can not be fixed by the sanity check."
            )

    def scaled(self, scaling_factor: int) -> BoundingBox:
        """Box around the same centre with each half-extent set to size * factor."""
        x_middle = (self.x_min + self.x_max) / 2
        y_middle = (self.y_min + self.y_max) / 2
        x_size = self.x_max - self.x_min
        y_size = self.y_max - self.y_min
        return BoundingBox(
            x_middle - x_size * scaling_factor,
            x_middle + x_size * scaling_factor,
            y_middle - y_size * scaling_factor,
            y_middle + y_size * scaling_factor,
        )

    def __str__(self) -> str:
        return (
            f"{self.x_min:.6f} {self.x_max:.6f}  -  "
            f"{self.y_min:.6f} {self.y_max:.6f}"
        )