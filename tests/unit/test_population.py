"""Unit tests for population analysis."""

import math

import numpy as np
import pytest

from watorsim.analysis.population import (
    PopulationHistory,
    estimate_lag,
    find_population_peaks,
    pearson_correlation,
    summarize_population,
)


def history_from(fish, sharks):
    history = PopulationHistory()
    for i, (f, s) in enumerate(zip(fish, sharks), start=1):
        history.record(i, f, s)
    return history


class TestPopulationHistory:
    def test_record(self):
        history = history_from([10, 12], [3, 2])
        assert len(history) == 2
        assert list(history.chronons) == [1, 2]
        assert list(history.fish) == [10, 12]
        assert list(history.sharks) == [3, 2]
        assert history.fish.dtype == np.int64

    def test_empty(self):
        history = PopulationHistory()
        assert len(history) == 0
        assert history.fish.shape == (0,)


class TestCorrelation:
    def test_perfect_anticorrelation(self):
        a = np.array([1.0, 2.0, 3.0, 4.0])
        assert np.isclose(pearson_correlation(a, -a), -1.0)

    def test_constant_series_is_nan(self):
        a = np.array([1.0, 2.0, 3.0])
        assert math.isnan(pearson_correlation(a, np.ones(3)))

    def test_short_series_is_nan(self):
        assert math.isnan(pearson_correlation(np.array([1.0]), np.array([2.0])))


class TestLag:
    def test_shifted_sine(self):
        t = np.arange(200)
        fish = np.sin(2 * np.pi * t / 20)
        sharks = np.sin(2 * np.pi * (t - 3) / 20)
        assert estimate_lag(fish, sharks) == 3

    def test_identical_series(self):
        t = np.arange(100)
        series = np.sin(2 * np.pi * t / 25)
        assert estimate_lag(series, series) == 0

    def test_constant_series(self):
        assert estimate_lag(np.ones(10), np.arange(10.0)) == 0


class TestPeaks:
    def test_finds_oscillation_peaks(self):
        t = np.arange(100)
        series = 100 + 50 * np.sin(2 * np.pi * t / 25)
        peaks = find_population_peaks(series)
        # Maxima near t = 6, 31, 56, 81
        assert len(peaks) == 4
        assert np.all(np.abs(np.diff(peaks) - 25) <= 1)

    def test_ignores_small_jitter(self):
        series = np.array([100.0, 100.4, 100.0, 100.3, 100.0] * 4)
        assert len(find_population_peaks(series, prominence=1.0)) == 0

    def test_short_series(self):
        assert len(find_population_peaks(np.array([1.0, 2.0]))) == 0


class TestSummary:
    def test_summary_fields(self):
        history = history_from([100, 120, 90, 110], [10, 5, 15, 0])
        summary = summarize_population(history)
        assert summary.n_chronons == 4
        assert summary.min_fish == 90
        assert summary.max_fish == 120
        assert summary.mean_fish == pytest.approx(105.0)
        assert summary.min_sharks == 0
        assert summary.max_sharks == 15
        assert summary.mean_sharks == pytest.approx(7.5)
        assert -1.0 <= summary.correlation <= 1.0

    def test_empty_history_raises(self):
        with pytest.raises(ValueError):
            summarize_population(PopulationHistory())

    def test_single_chronon(self):
        summary = summarize_population(history_from([10], [0]))
        assert summary.n_chronons == 1
        assert math.isnan(summary.correlation)
        assert summary.shark_lag == 0
        assert len(summary.fish_peaks) == 0
