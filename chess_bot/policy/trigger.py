"""
Trigger Policy

Decides, once per decision cycle, whether the engine side moves at all.
This paces the engine against a host that ticks many times per second.

The gate is a single uniform draw compared with a tunable probability.
legacy_draws=True reproduces the older scheme instead: two independent
integers in [0, 24) compared for equality, which fires with probability
1/24 per cycle.
"""

import random
from typing import Optional

LEGACY_DRAW_RANGE = 24
LEGACY_TRIGGER_PROBABILITY = 1 / LEGACY_DRAW_RANGE


class TriggerPolicy:
    """
    Per-cycle probabilistic gate.

    Attributes:
        probability: Chance of acting on each call to should_act()
        legacy_draws: Use the two-draws-for-equality scheme
    """

    def __init__(
        self,
        probability: float = LEGACY_TRIGGER_PROBABILITY,
        rng: Optional[random.Random] = None,
        legacy_draws: bool = False,
    ):
        if not 0.0 < probability <= 1.0:
            raise ValueError(f"probability must be within (0, 1], got {probability}")

        self.probability = probability
        self.legacy_draws = legacy_draws
        self.rng = rng if rng is not None else random.Random()

    @property
    def effective_probability(self) -> float:
        if self.legacy_draws:
            return LEGACY_TRIGGER_PROBABILITY
        return self.probability

    def should_act(self) -> bool:
        """Draw fresh randomness and decide whether to act this cycle."""
        if self.legacy_draws:
            return self.rng.randrange(LEGACY_DRAW_RANGE) == self.rng.randrange(LEGACY_DRAW_RANGE)
        return self.rng.random() < self.probability

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(probability={self.effective_probability:.4f}, "
            f"legacy_draws={self.legacy_draws})"
        )
