"""
Cells: the three possible occupants of a grid slot.

A slot holds exactly one of:
- Empty: open water, no payload
- Fish: age plus chronons since it last bred
- Shark: age, chronons since it last bred, chronons since it last ate

Cells are immutable records. The rule engine writes new records into the
grid rather than mutating the ones already there.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Union

# Breeding and hunger counters are bounded like a byte
COUNTER_MAX = 255


def bump_counter(value: int) -> int:
    """Increment a bounded counter, saturating at COUNTER_MAX."""
    return min(value + 1, COUNTER_MAX)


@dataclass(frozen=True)
class Empty:
    """An unoccupied slot."""


@dataclass(frozen=True)
class Fish:
    """A fish and its counters."""

    lived_chronons: int = 0  # Age, unbounded
    since_reproduced: int = 0  # 0..COUNTER_MAX

    def aged(self) -> Fish:
        """Return this fish one chronon older."""
        return replace(
            self,
            lived_chronons=self.lived_chronons + 1,
            since_reproduced=bump_counter(self.since_reproduced),
        )


@dataclass(frozen=True)
class Shark:
    """A shark and its counters."""

    lived_chronons: int = 0  # Age, unbounded
    since_reproduced: int = 0  # 0..COUNTER_MAX
    since_ate: int = 0  # 0..COUNTER_MAX

    def aged(self) -> Shark:
        """Return this shark one chronon older and hungrier."""
        return replace(
            self,
            lived_chronons=self.lived_chronons + 1,
            since_reproduced=bump_counter(self.since_reproduced),
            since_ate=bump_counter(self.since_ate),
        )


Cell = Union[Empty, Fish, Shark]

EMPTY = Empty()


def is_empty(cell) -> bool:
    return isinstance(cell, Empty)


def is_fish(cell) -> bool:
    return isinstance(cell, Fish)


def is_shark(cell) -> bool:
    return isinstance(cell, Shark)
