"""
Core engine primitives.

This layer knows NOTHING about terminals, plots or population analysis.
It only knows:
- Cells (empty, fish, shark) and their counters
- Grid topology (neighbor lookup with or without wraparound)
- The per-chronon update rules
- Running the chronon loop until the sharks die out
"""

from watorsim.core.cells import Cell, Empty, Fish, Shark, EMPTY, is_empty, is_fish, is_shark
from watorsim.core.config import WatorConfig
from watorsim.core.topology import neighbors, neighbor_indices, validate_dimensions
from watorsim.core.rules import RandomSource, animate, step
from watorsim.core.world import initialize, count_population, world_from_rows
from watorsim.core.stats import Stats
from watorsim.core.simulation import Simulation, SimulationState, is_terminal

__all__ = [
    "Cell",
    "Empty",
    "Fish",
    "Shark",
    "EMPTY",
    "is_empty",
    "is_fish",
    "is_shark",
    "WatorConfig",
    "neighbors",
    "neighbor_indices",
    "validate_dimensions",
    "RandomSource",
    "animate",
    "step",
    "initialize",
    "count_population",
    "world_from_rows",
    "Stats",
    "Simulation",
    "SimulationState",
    "is_terminal",
]
