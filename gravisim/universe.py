"""Collection of point-mass bodies with their physical state."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from gravisim.bounding_box import BoundingBox
from gravisim.vector2d import Vector2d


@dataclass
class Universe:
    """Bodies stored column-wise: weights in kg, forces in N, velocities in m/s, positions in m."""

    weights: list[float] = field(default_factory=list)
    forces: list[Vector2d] = field(default_factory=list)
    velocities: list[Vector2d] = field(default_factory=list)
    positions: list[Vector2d] = field(default_factory=list)
    current_simulation_epoch: int = 0

    @property
    def num_bodies(self) -> int:
        return len(self.weights)

    def add_body(
        self,
        weight: float,
        position: Vector2d,
        velocity: Vector2d = Vector2d(),
        force: Vector2d = Vector2d(),
    ) -> None:
        """Append a body to the universe."""
        self.weights.append(weight)
        self.positions.append(position)
        self.velocities.append(velocity)
        self.forces.append(force)

    def remove_body(self, index: int) -> tuple[float, Vector2d, Vector2d, Vector2d]:
        """Delete the body at the given index; later bodies shift down.

        Returns the removed body's weight, position, velocity and force.
        """
        force = self.forces.pop(index)
        position = self.positions.pop(index)
        velocity = self.velocities.pop(index)
        weight = self.weights.pop(index)
        return weight, position, velocity, force

    def bounding_box(self) -> BoundingBox:
        """Smallest box around all positions.

        The upper bounds start from the smallest positive float, so they
        never drop below it.
        """
        xs = [position.x for position in self.positions]
        ys = [position.y for position in self.positions]
        return BoundingBox(
            min(xs, default=sys.float_info.max),
            max([sys.float_info.min, *xs]),
            min(ys, default=sys.float_info.max),
            max([sys.float_info.min, *ys]),
        )

    def describe(self) -> str:
        """Human-readable listing of every body."""
        return "".join(
            "Body:\n"
            f"\tweight: {weight:g}\n"
            f"\tvelocity: ({velocity.x:g} , {velocity.y:g})\n"
            f"\tposition: {position.x:g} , {position.y:g})\n"
            for weight, velocity, position in zip(
                self.weights, self.velocities, self.positions
            )
        )