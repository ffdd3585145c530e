"""Tests for world and population plots."""

import matplotlib.pyplot as plt
import numpy as np

from watorsim.analysis import PopulationHistory
from watorsim.core.cells import EMPTY, Fish, Shark
from watorsim.viz import plot_phase_portrait, plot_population, plot_world, world_to_array


def test_world_to_array():
    world = [Fish(), EMPTY, Shark(), Shark(), Fish(), EMPTY]
    arr = world_to_array(world, 3)
    assert arr.shape == (2, 3)
    assert np.array_equal(arr, [[1, 0, 2], [2, 1, 0]])


def test_plots_return_figures():
    history = PopulationHistory()
    for c, (f, s) in enumerate([(40, 5), (45, 6), (38, 9)], start=1):
        history.record(c, f, s)

    fig, ax = plot_world([Fish(), EMPTY, Shark(), EMPTY], 2)
    assert ax.get_title() == "Wa-Tor"
    fig2, ax2 = plot_population(history)
    assert len(ax2.lines) == 2
    fig3, _ = plot_phase_portrait(history)
    plt.close("all")
