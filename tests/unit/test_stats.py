"""Unit tests for Stats."""

import sys

from watorsim.core.stats import Stats


class TestStats:
    def test_initial_values(self):
        stats = Stats()
        assert stats.chronon == 1
        assert stats.min_fish == sys.maxsize
        assert stats.max_fish == 0
        assert stats.min_shark == sys.maxsize
        assert stats.max_shark == 0

    def test_first_update_sets_both_extremes(self):
        stats = Stats()
        stats.update(fish=40, sharks=7)
        assert (stats.min_fish, stats.max_fish) == (40, 40)
        assert (stats.min_shark, stats.max_shark) == (7, 7)

    def test_running_extremes(self):
        stats = Stats()
        for fish, sharks in [(40, 7), (55, 3), (20, 12), (30, 0)]:
            stats.update(fish, sharks)
        assert (stats.min_fish, stats.max_fish) == (20, 55)
        assert (stats.min_shark, stats.max_shark) == (0, 12)

    def test_update_leaves_chronon_alone(self):
        stats = Stats()
        stats.update(1, 1)
        assert stats.chronon == 1

    def test_format_line(self):
        stats = Stats(chronon=12)
        stats.update(100, 9)
        stats.update(90, 11)
        line = stats.format_line(90, 11, width=40, height=20)
        assert line == (
            "Chronon: 12 Fish: 90 (min: 90, max: 100) "
            "Sharks: 11 (min: 9, max: 11) W: 40 H: 20"
        )
