"""Position integration for one simulation epoch."""

from gravisim.universe import Universe

EPOCH_IN_SECONDS = 2.628e6
"""Duration of one epoch: one month in seconds."""


def calculate_positions(universe: Universe) -> None:
    """Move every body by velocity times the epoch duration."""
    universe.positions = [
        position + velocity * EPOCH_IN_SECONDS
        for position, velocity in zip(universe.positions, universe.velocities)
    ]