"""
Pytest configuration and shared fixtures.
"""

import matplotlib
matplotlib.use("Agg")

import pytest
import numpy as np


class ScriptedRandom:
    """
    Random source with predictable draws.

    integers() returns queued picks in order, then 0 forever (always the
    first candidate). random() returns queued uniform draws.
    """

    def __init__(self, picks=(), uniforms=()):
        self.picks = list(picks)
        self.uniforms = list(uniforms)
        self.integer_calls = []

    def integers(self, low, high=None, size=None):
        self.integer_calls.append(low)
        return self.picks.pop(0) if self.picks else 0

    def random(self, size=None):
        if size is None:
            return self.uniforms.pop(0)
        values, self.uniforms = self.uniforms[:size], self.uniforms[size:]
        return np.asarray(values, dtype=np.float64)


@pytest.fixture
def first_pick():
    """Random source that always picks the first candidate."""
    return ScriptedRandom()


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def small_config():
    """Configuration for a small 3x3 toroidal world."""
    from watorsim.core import WatorConfig
    return WatorConfig(width=3, height=3, seed=42)


@pytest.fixture
def medium_config():
    """Configuration for a 40x30 toroidal world."""
    from watorsim.core import WatorConfig
    return WatorConfig(width=40, height=30, seed=42)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
