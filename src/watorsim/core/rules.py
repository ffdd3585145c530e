"""
Update rules: advance every occupant of the grid by one chronon.

The pass is sequential and in place:
- Cells are visited once, in increasing linear index order
- The variant of world[i] is read before slot i is touched in the pass
- Neighbor reads see slots already rewritten earlier in the same pass

So a fish or shark that moves to a higher index is animated again when the
scan reaches it, and a slot vacated earlier in the pass is a valid
destination. This is the reference Wa-Tor update order, not a synchronous
(double-buffered) automaton.
"""

from __future__ import annotations
from typing import Protocol, Sequence, TypeVar

import numpy as np

from watorsim.core.cells import EMPTY, Fish, Shark, is_empty, is_fish
from watorsim.core.config import WatorConfig
from watorsim.core.topology import neighbors, validate_dimensions
from watorsim.core.world import count_population

T = TypeVar("T")


class RandomSource(Protocol):
    """Source of randomness; numpy.random.Generator satisfies it."""

    def integers(self, low, high=None, size=None):
        """Uniform integer in [0, low) when high is None, else [low, high)."""
        ...

    def random(self, size=None):
        """Uniform float(s) in [0, 1)."""
        ...


def choose(rng: RandomSource, candidates: Sequence[T]) -> T | None:
    """Pick one candidate uniformly, or None if there are none."""
    if not candidates:
        return None
    return candidates[int(rng.integers(len(candidates)))]


def find_empty(rng: RandomSource, neighbor_pairs: list[tuple[int, object]]) -> int | None:
    """Index of a uniformly chosen empty neighbor, if any."""
    pick = choose(rng, [pair for pair in neighbor_pairs if is_empty(pair[1])])
    return None if pick is None else pick[0]


def find_prey(rng: RandomSource, neighbor_pairs: list[tuple[int, object]]) -> int | None:
    """Index of a uniformly chosen neighboring fish, if any."""
    pick = choose(rng, [pair for pair in neighbor_pairs if is_fish(pair[1])])
    return None if pick is None else pick[0]


def animate_fish(
    world: list,
    width: int,
    index: int,
    fish: Fish,
    config: WatorConfig,
    rng: RandomSource,
) -> None:
    """Move, age and possibly breed the fish found at world[index]."""
    target = find_empty(rng, neighbors(world, width, index, config.wrap))
    fish = fish.aged()

    if target is None:
        world[index] = fish
        return

    if fish.since_reproduced > config.fish_breed_interval:
        fish = Fish(lived_chronons=fish.lived_chronons, since_reproduced=0)
        world[index] = Fish()
    else:
        world[index] = EMPTY
    world[target] = fish


def animate_shark(
    world: list,
    width: int,
    index: int,
    shark: Shark,
    config: WatorConfig,
    rng: RandomSource,
) -> None:
    """Hunt, move, age, starve or breed the shark found at world[index]."""
    neighbor_pairs = neighbors(world, width, index, config.wrap)
    prey = find_prey(rng, neighbor_pairs)
    shark = shark.aged()

    if prey is not None:
        # The fish in the target slot is eaten by being overwritten
        target = prey
        shark = Shark(shark.lived_chronons, shark.since_reproduced, since_ate=0)
    else:
        target = find_empty(rng, neighbor_pairs)

    # Starvation wins over moving and breeding
    if shark.since_ate > config.shark_starve_interval:
        world[index] = EMPTY
        return

    if target is None:
        world[index] = shark
        return

    if shark.since_reproduced > config.shark_breed_interval:
        shark = Shark(shark.lived_chronons, since_reproduced=0, since_ate=shark.since_ate)
        world[index] = Shark()
    else:
        world[index] = EMPTY
    world[target] = shark


def animate(world: list, width: int, config: WatorConfig, rng: RandomSource) -> None:
    """Run one sequential in-place pass over the whole grid."""
    for i in range(len(world)):
        cell = world[i]
        if isinstance(cell, Fish):
            animate_fish(world, width, i, cell, config, rng)
        elif isinstance(cell, Shark):
            animate_shark(world, width, i, cell, config, rng)


def step(
    world: list,
    width: int,
    config: WatorConfig | None = None,
    rng: RandomSource | None = None,
) -> tuple[int, int]:
    """
    Advance the grid by exactly one chronon, in place.

    Args:
        world: Flat grid of cells, mutated in place
        width: Grid width; len(world) must be a multiple of it
        config: Rule intervals and boundary mode (defaults if None)
        rng: Random source (fresh numpy Generator if None)

    Returns:
        (fish_count, shark_count) after the step

    Raises:
        ValueError: if the grid is not a rectangle of the given width
    """
    height = validate_dimensions(len(world), width)
    if config is None:
        config = WatorConfig(width=width, height=height)
    if rng is None:
        rng = np.random.default_rng()

    animate(world, width, config, rng)

    fish, sharks, _ = count_population(world)
    return fish, sharks
