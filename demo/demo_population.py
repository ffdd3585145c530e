"""
Demo: Predator-prey oscillations in Wa-Tor.

The demo:
1. Seeds a 120x80 toroidal ocean (10% sharks, 40% fish)
2. Runs until the sharks die out or 2000 chronons pass
3. Summarizes the population cycles (peaks, correlation, shark lag)
4. Plots the final world, the population series and the phase portrait
"""

import matplotlib.pyplot as plt
from pathlib import Path

from watorsim.core import Simulation, WatorConfig
from watorsim.analysis import PopulationHistory, summarize_population
from watorsim.viz import plot_run_summary


def main():
    """Run the population dynamics demo."""
    print("=" * 60)
    print("Wa-Tor Population Dynamics Demo")
    print("=" * 60)

    print("\n1. Setting up world...")
    config = WatorConfig(width=120, height=80, seed=42)
    history = PopulationHistory()
    sim = Simulation(config=config, history=history)

    fish, sharks, empty = sim.population()
    print(f"   Grid size: {config.width}x{config.height}")
    print(f"   Initial: {fish} fish, {sharks} sharks, {empty} empty")
    print(f"   Breed: fish>{config.fish_breed_interval}, sharks>{config.shark_breed_interval}")
    print(f"   Starve: sharks>{config.shark_starve_interval}")

    print("\n2. Running...")
    n_max = 2000
    state = sim.run(max_chronons=n_max)
    print(f"   Stopped at chronon {sim.chronon}: {state.value}")

    print("\n3. Population summary...")
    summary = summarize_population(history)
    print(f"   Fish:   mean {summary.mean_fish:.1f}, range {summary.min_fish}-{summary.max_fish}")
    print(f"   Sharks: mean {summary.mean_sharks:.1f}, range {summary.min_sharks}-{summary.max_sharks}")
    print(f"   Correlation (fish, sharks): {summary.correlation:.3f}")
    print(f"   Fish peaks: {len(summary.fish_peaks)}, shark peaks: {len(summary.shark_peaks)}")
    print(f"   Sharks trail fish by {summary.shark_lag} chronons")

    print("\n4. Creating visualization...")
    fig = plot_run_summary(sim.world, config.width, history)

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)
    output_path = output_dir / "wator_population.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"   Saved to: {output_path}")

    plt.show()

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)

    return summary


if __name__ == "__main__":
    main()
