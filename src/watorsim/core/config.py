"""
Simulation configuration.

The classic Wa-Tor tunables live here as defaults. Everything the engine
needs is passed explicitly through WatorConfig so tests can vary it.
"""

from __future__ import annotations
from dataclasses import dataclass

FISH_BREED_INTERVAL = 10
SHARK_BREED_INTERVAL = 14
SHARK_STARVE_INTERVAL = 8
WRAP_WORLD = True
MS_BETWEEN_CHRONON = 5

# Initial distribution (remaining probability is empty water)
SHARK_PROBABILITY = 0.10
FISH_PROBABILITY = 0.40

# Sharks older than this are drawn with a different glyph
OLD_SHARK_AGE = 50


@dataclass
class WatorConfig:
    """Configuration for a Wa-Tor world."""

    width: int = 80  # Grid width (columns)
    height: int = 40  # Grid height (rows)
    fish_breed_interval: int = FISH_BREED_INTERVAL  # Fish breed once since_reproduced exceeds this
    shark_breed_interval: int = SHARK_BREED_INTERVAL  # Sharks breed once since_reproduced exceeds this
    shark_starve_interval: int = SHARK_STARVE_INTERVAL  # Sharks die once since_ate exceeds this
    wrap: bool = WRAP_WORLD  # Toroidal world if True, bounded otherwise
    shark_probability: float = SHARK_PROBABILITY
    fish_probability: float = FISH_PROBABILITY
    seed: int | None = None  # Seed for the default random source

    # Presentation only
    old_shark_age: int = OLD_SHARK_AGE
    delay_ms: int = MS_BETWEEN_CHRONON

    @property
    def n_cells(self) -> int:
        return self.width * self.height

    @property
    def distribution(self) -> tuple[float, float]:
        """(shark, fish) seeding probabilities."""
        return self.shark_probability, self.fish_probability

    def validate(self) -> None:
        """
        Reject configurations the engine cannot run.

        Raises:
            ValueError: on non-positive dimensions, negative intervals,
                or an invalid seeding distribution
        """
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"World must be at least 1x1, got {self.width}x{self.height}"
            )
        for name in ("fish_breed_interval", "shark_breed_interval", "shark_starve_interval"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        validate_distribution(self.shark_probability, self.fish_probability)
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {self.delay_ms}")


def validate_distribution(shark_probability: float, fish_probability: float) -> None:
    """Raise ValueError unless both probabilities fit in [0, 1] together."""
    for name, p in (("shark", shark_probability), ("fish", fish_probability)):
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"{name} probability must be in [0, 1], got {p}")
    if shark_probability + fish_probability > 1.0:
        raise ValueError(
            "shark and fish probabilities must sum to at most 1, got "
            f"{shark_probability + fish_probability}"
        )
