"""Running population statistics across chronons."""

from __future__ import annotations
import sys
from dataclasses import dataclass


@dataclass
class Stats:
    """Chronon counter plus min/max fish and shark populations seen so far."""

    chronon: int = 1
    min_fish: int = sys.maxsize
    max_fish: int = 0
    min_shark: int = sys.maxsize
    max_shark: int = 0

    def update(self, fish: int, sharks: int) -> None:
        """Fold one chronon's counts into the running extremes."""
        self.min_fish = min(self.min_fish, fish)
        self.max_fish = max(self.max_fish, fish)
        self.min_shark = min(self.min_shark, sharks)
        self.max_shark = max(self.max_shark, sharks)

    def format_line(self, fish: int, sharks: int, width: int, height: int) -> str:
        return (
            f"Chronon: {self.chronon} "
            f"Fish: {fish} (min: {self.min_fish}, max: {self.max_fish}) "
            f"Sharks: {sharks} (min: {self.min_shark}, max: {self.max_shark}) "
            f"W: {width} H: {height}"
        )
