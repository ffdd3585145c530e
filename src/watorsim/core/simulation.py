"""
Simulation driver: owns the world and runs the chronon loop.

States:
- RUNNING: initial state, chronon counter starts at 1
- ALL_SHARKS_DEAD: entered after the first step that leaves no sharks

Fish extinction does not end a run; only shark extinction does.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, TYPE_CHECKING

import numpy as np

from watorsim.core.config import WatorConfig
from watorsim.core.rules import RandomSource, step
from watorsim.core.stats import Stats
from watorsim.core.world import count_population, initialize

if TYPE_CHECKING:
    from watorsim.analysis.population import PopulationHistory

logger = logging.getLogger(__name__)


class SimulationState(Enum):
    RUNNING = "running"
    ALL_SHARKS_DEAD = "all_sharks_dead"

    @property
    def is_terminated(self) -> bool:
        return self is not SimulationState.RUNNING


def is_terminal(shark_count: int) -> bool:
    """A run is over exactly when no sharks remain."""
    return shark_count == 0


@dataclass
class Simulation:
    """
    A Wa-Tor run.

    The world is validated and (unless supplied) randomly seeded on
    construction, so configuration errors surface before any step.
    """

    config: WatorConfig = field(default_factory=WatorConfig)
    rng: RandomSource | None = None
    world: list | None = None
    history: "PopulationHistory | None" = None

    state: SimulationState = field(default=SimulationState.RUNNING, init=False)
    stats: Stats = field(default_factory=Stats, init=False)

    def __post_init__(self):
        self.config.validate()
        if self.rng is None:
            self.rng = np.random.default_rng(self.config.seed)

        if self.world is None:
            self.world = initialize(
                self.config.width,
                self.config.height,
                self.config.distribution,
                rng=self.rng,
            )
        elif len(self.world) != self.config.n_cells:
            raise ValueError(
                f"World has {len(self.world)} cells, expected "
                f"{self.config.width}x{self.config.height}={self.config.n_cells}"
            )

        fish, sharks, _ = count_population(self.world)
        logger.info(
            "Created %dx%d world: %d fish, %d sharks",
            self.config.width, self.config.height, fish, sharks,
        )

    @property
    def chronon(self) -> int:
        return self.stats.chronon

    def step(self) -> tuple[int, int]:
        """
        Run one chronon.

        Returns:
            (fish_count, shark_count) after the chronon

        Raises:
            RuntimeError: if the run has already terminated
        """
        if self.state.is_terminated:
            raise RuntimeError(f"Simulation has terminated ({self.state.value})")

        fish, sharks = step(self.world, self.config.width, self.config, self.rng)
        self.stats.update(fish, sharks)
        if self.history is not None:
            self.history.record(self.stats.chronon, fish, sharks)
        logger.debug("Chronon %d: %d fish, %d sharks", self.stats.chronon, fish, sharks)

        if is_terminal(sharks):
            self.state = SimulationState.ALL_SHARKS_DEAD
            logger.info("All sharks died after %d chronons", self.stats.chronon)
        else:
            self.stats.chronon += 1
        return fish, sharks

    def run(
        self,
        max_chronons: int | None = None,
        on_chronon: Callable[["Simulation", int, int], None] | None = None,
    ) -> SimulationState:
        """
        Step until the sharks die out or max_chronons steps have run.

        Args:
            max_chronons: Step limit (unbounded if None)
            on_chronon: Called as on_chronon(sim, fish, sharks) after each step

        Returns:
            The state the run stopped in
        """
        n = 0
        while not self.state.is_terminated:
            if max_chronons is not None and n >= max_chronons:
                break
            fish, sharks = self.step()
            n += 1
            if on_chronon is not None:
                on_chronon(self, fish, sharks)
        return self.state

    def snapshot(self) -> tuple:
        """Read-only copy of the grid for renderers."""
        return tuple(self.world)

    def population(self) -> tuple[int, int, int]:
        """Current (fish, sharks, empty) counts."""
        return count_population(self.world)
