"""Vectors, bounding boxes, bodies, position updates and collision merging for 2D n-body simulation."""

__version__ = "0.1.0"
__all__ = ["vector2d", "bounding_box", "universe", "motion", "collisions"]