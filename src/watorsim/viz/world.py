"""
Plots of the ocean grid and of population dynamics.

- World snapshot: empty water, fish and sharks as a categorical heatmap
- Population time series: fish and sharks per chronon
- Phase portrait: sharks against fish, tracing the predator-prey cycle

All plots use matplotlib and return (fig, ax) so callers can compose them.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from watorsim.core.cells import Fish, Shark

if TYPE_CHECKING:
    from watorsim.analysis.population import PopulationHistory

# Cell codes used by world_to_array
CODE_EMPTY = 0
CODE_FISH = 1
CODE_SHARK = 2

# Deep water → fish → shark
CMAP_WORLD = ListedColormap(
    [
        (0.035, 0.110, 0.231),  # Deep navy water
        (0.992, 0.780, 0.318),  # Warm yellow fish
        (0.827, 0.227, 0.235),  # Red shark
    ],
    name="wator",
)

COLOR_FISH = "tab:orange"
COLOR_SHARK = "tab:red"


def world_to_array(world: Sequence, width: int) -> np.ndarray:
    """Encode a flat world as a [ny, nx] array of cell codes."""
    codes = np.full(len(world), CODE_EMPTY, dtype=np.int8)
    for i, cell in enumerate(world):
        if isinstance(cell, Fish):
            codes[i] = CODE_FISH
        elif isinstance(cell, Shark):
            codes[i] = CODE_SHARK
    return codes.reshape(-1, width)


def plot_world(
    world: Sequence,
    width: int,
    title: str = "Wa-Tor",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """
    Plot a world snapshot.

    Args:
        world: Flat grid of cells
        width: Grid width
        title: Plot title
        ax: Existing axes to plot on (creates new figure if None)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(
        world_to_array(world, width),
        cmap=CMAP_WORLD,
        vmin=CODE_EMPTY,
        vmax=CODE_SHARK,
        interpolation="nearest",
        aspect="equal",
    )
    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])

    return fig, ax


def plot_population(
    history: "PopulationHistory",
    title: str = "Population",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot fish and shark counts against chronon."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    chronons = history.chronons
    ax.plot(chronons, history.fish, color=COLOR_FISH, linewidth=1.5, label="Fish")
    ax.plot(chronons, history.sharks, color=COLOR_SHARK, linewidth=1.5, label="Sharks")

    ax.set_xlabel("Chronon")
    ax.set_ylabel("Count")
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_phase_portrait(
    history: "PopulationHistory",
    title: str = "Predator-Prey Phase Portrait",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (7, 7),
) -> tuple[Figure, Axes]:
    """Plot sharks against fish, colored by chronon."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    fish = history.fish
    sharks = history.sharks
    ax.plot(fish, sharks, color="gray", alpha=0.4, linewidth=0.8, zorder=1)
    sc = ax.scatter(fish, sharks, c=history.chronons, cmap="viridis", s=6, zorder=2)
    plt.colorbar(sc, ax=ax, fraction=0.046, pad=0.04, label="Chronon")

    if len(fish) > 0:
        ax.scatter([fish[0]], [sharks[0]], color="green", s=80, marker="o", label="Start", zorder=3)
        ax.scatter([fish[-1]], [sharks[-1]], color="black", s=80, marker="X", label="End", zorder=3)
        ax.legend()

    ax.set_xlabel("Fish")
    ax.set_ylabel("Sharks")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_run_summary(
    world: Sequence,
    width: int,
    history: "PopulationHistory",
    figsize: tuple[float, float] = (15, 5),
) -> Figure:
    """Final world, population series and phase portrait side by side."""
    fig, axes = plt.subplots(1, 3, figsize=figsize)
    plot_world(world, width, title="Final World", ax=axes[0])
    plot_population(history, ax=axes[1])
    plot_phase_portrait(history, ax=axes[2])
    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
