"""
Visualization utilities.

- World snapshots
- Population time series
- Predator-prey phase portraits
"""

from watorsim.viz.world import (
    world_to_array,
    plot_world,
    plot_population,
    plot_phase_portrait,
    plot_run_summary,
    save_figure,
)

__all__ = [
    "world_to_array",
    "plot_world",
    "plot_population",
    "plot_phase_portrait",
    "plot_run_summary",
    "save_figure",
]
