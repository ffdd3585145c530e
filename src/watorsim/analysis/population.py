"""
Population dynamics: record and summarize fish/shark counts over a run.

Wa-Tor populations oscillate like a Lotka-Volterra system:
- Fish boom while sharks are scarce
- Sharks boom after the fish, then starve the fish out
- Shark numbers crash, and the cycle repeats

The summary quantifies this: per-species extremes, correlation between
the two series, oscillation peaks, and how many chronons the shark cycle
trails the fish cycle.
"""

from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np
from scipy import signal, stats


@dataclass
class PopulationHistory:
    """Per-chronon population counts, in recording order."""

    _chronons: list[int] = field(default_factory=list)
    _fish: list[int] = field(default_factory=list)
    _sharks: list[int] = field(default_factory=list)

    def record(self, chronon: int, fish: int, sharks: int) -> None:
        self._chronons.append(chronon)
        self._fish.append(fish)
        self._sharks.append(sharks)

    def __len__(self) -> int:
        return len(self._chronons)

    @property
    def chronons(self) -> np.ndarray:
        return np.asarray(self._chronons, dtype=np.int64)

    @property
    def fish(self) -> np.ndarray:
        return np.asarray(self._fish, dtype=np.int64)

    @property
    def sharks(self) -> np.ndarray:
        return np.asarray(self._sharks, dtype=np.int64)


@dataclass
class PopulationSummary:
    """Summary statistics of a recorded run."""

    n_chronons: int

    mean_fish: float
    min_fish: int
    max_fish: int
    mean_sharks: float
    min_sharks: int
    max_sharks: int

    correlation: float  # Pearson r between fish and shark series (NaN if undefined)
    fish_peaks: np.ndarray  # Indices of local maxima in the fish series
    shark_peaks: np.ndarray  # Indices of local maxima in the shark series
    shark_lag: int  # Chronons the shark series trails the fish series


def pearson_correlation(a: np.ndarray, b: np.ndarray) -> float:
    """Pearson r, or NaN for short or constant series."""
    if len(a) < 2 or np.ptp(a) == 0 or np.ptp(b) == 0:
        return float("nan")
    r, _ = stats.pearsonr(a, b)
    return float(r)


def estimate_lag(leading: np.ndarray, trailing: np.ndarray) -> int:
    """
    Lag (in samples) at which trailing best matches leading.

    Positive when trailing[n] resembles leading[n - lag]. Zero for
    short or constant series.
    """
    if len(leading) < 2 or np.ptp(leading) == 0 or np.ptp(trailing) == 0:
        return 0
    a = trailing - trailing.mean()
    b = leading - leading.mean()
    xcorr = signal.correlate(a, b, mode="full")
    lags = signal.correlation_lags(len(a), len(b), mode="full")
    return int(lags[np.argmax(xcorr)])


def find_population_peaks(series: np.ndarray, prominence: float | None = None) -> np.ndarray:
    """Indices of oscillation peaks in a population series."""
    if len(series) < 3:
        return np.array([], dtype=np.int64)
    if prominence is None:
        # Ignore jitter below 5% of the series range
        prominence = max(1.0, 0.05 * float(np.ptp(series)))
    peaks, _ = signal.find_peaks(series, prominence=prominence)
    return peaks


def summarize_population(history: PopulationHistory) -> PopulationSummary:
    """
    Summarize a recorded run.

    Raises:
        ValueError: if the history is empty
    """
    if len(history) == 0:
        raise ValueError("Cannot summarize an empty population history")

    fish = history.fish.astype(np.float64)
    sharks = history.sharks.astype(np.float64)

    return PopulationSummary(
        n_chronons=len(history),
        mean_fish=float(fish.mean()),
        min_fish=int(fish.min()),
        max_fish=int(fish.max()),
        mean_sharks=float(sharks.mean()),
        min_sharks=int(sharks.min()),
        max_sharks=int(sharks.max()),
        correlation=pearson_correlation(fish, sharks),
        fish_peaks=find_population_peaks(fish),
        shark_peaks=find_population_peaks(sharks),
        shark_lag=estimate_lag(fish, sharks),
    )
