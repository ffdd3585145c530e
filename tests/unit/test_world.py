"""Unit tests for world construction and counting."""

import numpy as np
import pytest

from watorsim.core.cells import EMPTY, Fish, Shark
from watorsim.core.world import count_population, initialize, world_from_rows


class TestInitialize:
    """Tests for random seeding."""

    def test_size(self, rng):
        world = initialize(7, 5, rng=rng)
        assert len(world) == 35

    def test_threshold_mapping(self, scripted):
        rng = scripted(uniforms=[0.05, 0.3, 0.7, 0.0999, 0.4999, 0.51])
        world = initialize(3, 2, rng=rng)
        assert world == [Shark(), Fish(), EMPTY, Shark(), Fish(), EMPTY]

    def test_default_proportions(self, rng):
        world = initialize(100, 100, rng=rng)
        fish, sharks, empty = count_population(world)
        assert abs(sharks - 1000) < 150
        assert abs(fish - 4000) < 300
        assert abs(empty - 5000) < 300

    def test_occupants_start_zeroed(self, rng):
        world = initialize(20, 20, rng=rng)
        for cell in world:
            assert cell in (EMPTY, Fish(), Shark())

    def test_custom_distribution(self, rng):
        world = initialize(10, 10, distribution=(0.0, 1.0), rng=rng)
        assert count_population(world) == (100, 0, 0)

    def test_seeded_is_reproducible(self):
        a = initialize(10, 10, rng=np.random.default_rng(3))
        b = initialize(10, 10, rng=np.random.default_rng(3))
        assert a == b

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_rejects_bad_dimensions(self, width, height):
        with pytest.raises(ValueError):
            initialize(width, height)

    @pytest.mark.parametrize("distribution", [(0.6, 0.6), (-0.1, 0.4), (0.1, 1.5)])
    def test_rejects_bad_distribution(self, distribution):
        with pytest.raises(ValueError):
            initialize(5, 5, distribution=distribution)


class TestWorldFromRows:
    def test_parse(self):
        world, width = world_from_rows(["f.S", "..f"])
        assert width == 3
        assert world == [Fish(), EMPTY, Shark(), EMPTY, EMPTY, Fish()]

    def test_ragged_rows(self):
        with pytest.raises(ValueError):
            world_from_rows(["f.S", ".."])

    def test_unknown_char(self):
        with pytest.raises(ValueError):
            world_from_rows(["fx"])


class TestCountPopulation:
    def test_counts(self):
        world, _ = world_from_rows(["ffS", "..S", "f.."])
        assert count_population(world) == (3, 2, 4)

    def test_empty_world(self):
        assert count_population([]) == (0, 0, 0)
