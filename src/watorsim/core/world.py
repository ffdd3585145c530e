"""
World construction and population counting.

A world is a plain list of cells of length width * height, indexed by
i = row * width + col.
"""

from __future__ import annotations
from typing import Iterable, Sequence

import numpy as np

from watorsim.core.cells import EMPTY, Fish, Shark
from watorsim.core.config import SHARK_PROBABILITY, FISH_PROBABILITY, validate_distribution

# Characters understood by world_from_rows
CELL_CHARS = {".": EMPTY, "f": Fish(), "S": Shark()}


def initialize(
    width: int,
    height: int,
    distribution: tuple[float, float] = (SHARK_PROBABILITY, FISH_PROBABILITY),
    rng=None,
) -> list:
    """
    Create a randomly populated world.

    Each cell is drawn independently: a shark with probability
    distribution[0], a fish with probability distribution[1], empty
    otherwise. All occupants start with zeroed counters.

    Args:
        width, height: Grid dimensions, both at least 1
        distribution: (shark_probability, fish_probability)
        rng: Random source with a numpy-style random(size) (fresh Generator if None)

    Raises:
        ValueError: on non-positive dimensions or an invalid distribution
    """
    if width < 1 or height < 1:
        raise ValueError(f"World must be at least 1x1, got {width}x{height}")
    shark_p, fish_p = distribution
    validate_distribution(shark_p, fish_p)
    if rng is None:
        rng = np.random.default_rng()

    draws = np.asarray(rng.random(width * height))

    world = []
    for p in draws:
        if p < shark_p:
            world.append(Shark())
        elif p < shark_p + fish_p:
            world.append(Fish())
        else:
            world.append(EMPTY)
    return world


def world_from_rows(rows: Iterable[str]) -> tuple[list, int]:
    """
    Build a world from text rows ('.' empty, 'f' fish, 'S' shark).

    Returns:
        (world, width)
    """
    rows = [row.strip() for row in rows if row.strip()]
    if not rows:
        raise ValueError("At least one row is required")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("All rows must have the same length")

    world = []
    for row in rows:
        for ch in row:
            if ch not in CELL_CHARS:
                raise ValueError(f"Unknown cell character {ch!r}")
            world.append(CELL_CHARS[ch])
    return world, width


def count_population(world: Sequence) -> tuple[int, int, int]:
    """Return (fish, sharks, empty) counts."""
    fish = sharks = 0
    for cell in world:
        if isinstance(cell, Fish):
            fish += 1
        elif isinstance(cell, Shark):
            sharks += 1
    return fish, sharks, len(world) - fish - sharks
