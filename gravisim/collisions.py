"""Detection and resolution of close encounters between bodies.

Two bodies collide when they are closer than 100,000,000 km (about the
distance between the earth and the sun). Colliding bodies are merged
into the heaviest participant, conserving momentum.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator

from gravisim.universe import Universe

COLLISION_DISTANCE = 100_000_000_000.0
"""Distance in metres below which two bodies are merged."""

Collision = tuple[int, int]


def _collisions_of(universe: Universe, indices: Iterable[int]) -> Iterator[Collision]:
    """Yield ordered pairs (i, j), i from ``indices``, of bodies that are too close."""
    positions = universe.positions
    for first in indices:
        position = positions[first]
        for second, other in enumerate(positions):
            if first != second and (position - other).length() < COLLISION_DISTANCE:
                yield first, second


def detect_collisions(universe: Universe) -> list[Collision]:
    """Return every ordered pair of distinct bodies that are close enough to collide."""
    return list(_collisions_of(universe, range(universe.num_bodies)))


def _heaviest_participant(universe: Universe, collisions: list[Collision]) -> int:
    """Index of the heaviest body taking part in any collision; earliest wins ties."""
    weights = universe.weights
    heaviest = collisions[0][0]
    heaviest_mass = weights[heaviest]
    for pair in collisions:
        for index in pair:
            if weights[index] > heaviest_mass:
                heaviest, heaviest_mass = index, weights[index]
    return heaviest


def _resolve(universe: Universe, collisions: list[Collision]) -> None:
    """Merge colliding bodies, heaviest first, and remove the absorbed ones."""
    while collisions:
        heaviest = _heaviest_participant(universe, collisions)

        partners: set[int] = set()
        for first, second in collisions:
            if first == heaviest:
                partners.add(second)
            if second == heaviest:
                partners.add(first)

        for partner in sorted(partners):
            m1 = universe.weights[heaviest]
            m2 = universe.weights[partner]
            v1 = universe.velocities[heaviest]
            v2 = universe.velocities[partner]
            universe.velocities[heaviest] = (v1 * m1 + v2 * m2) / (m1 + m2)
            universe.weights[heaviest] = m1 + m2

        collisions = [
            pair
            for pair in collisions
            if pair[0] not in partners and pair[1] not in partners
        ]

        for partner in sorted(partners, reverse=True):
            universe.remove_body(partner)


def find_collisions(universe: Universe) -> None:
    """Detect and resolve all collisions in the universe in place."""
    _resolve(universe, detect_collisions(universe))


def find_collisions_parallel(universe: Universe, workers: int | None = None) -> None:
    """Like :func:`find_collisions`, but detection is split across worker threads.

    Each worker checks a contiguous chunk of bodies; the last worker also
    takes the remainder. Results are combined in chunk order.
    """
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("number of workers must be at least 1")

    count = universe.num_bodies
    chunk_size = count // workers
    chunks = [
        range(
            chunk_size * worker,
            count if worker == workers - 1 else chunk_size * (worker + 1),
        )
        for worker in range(workers)
    ]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        partial_results = executor.map(
            lambda chunk: list(_collisions_of(universe, chunk)), chunks
        )
        collisions = [pair for partial in partial_results for pair in partial]

    _resolve(universe, collisions)