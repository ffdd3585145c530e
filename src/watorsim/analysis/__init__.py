"""
Analysis layer: derived quantities for reporting and plotting.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- PopulationHistory: per-chronon fish/shark counts
- summarize_population: extremes, correlation, peaks and predator lag
"""

from watorsim.analysis.population import (
    PopulationHistory,
    PopulationSummary,
    summarize_population,
    pearson_correlation,
    estimate_lag,
    find_population_peaks,
)

__all__ = [
    "PopulationHistory",
    "PopulationSummary",
    "summarize_population",
    "pearson_correlation",
    "estimate_lag",
    "find_population_peaks",
]
