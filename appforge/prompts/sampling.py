"""Weighted random selection of prompt variants.

The random source is injected so tests (and callers that need reproducible
renders) can pass a seeded ``random.Random``.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

from .models import PromptVariant


class RandomSource(Protocol):
    """Anything that returns a float uniformly distributed in ``[0, 1)``."""

    def random(self) -> float: ...


class VariantSampler:
    """Picks one variant with probability ``weight / total_weight``."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def pick(self, variants: Sequence[PromptVariant]) -> PromptVariant:
        """Return one variant from *variants*.

        Draws ``r`` in ``[0, total)`` and subtracts each weight in order until
        ``r`` is no longer positive. Weights are not validated: when the total
        is zero or negative the first variant is returned.

        Raises:
            ValueError: If *variants* is empty.
        """
        if not variants:
            raise ValueError("Cannot sample from an empty variant list")

        total = sum(v.weight for v in variants)
        r = self.rng.random() * total
        for variant in variants:
            r -= variant.weight
            if r <= 0:
                return variant
        # Non-positive totals or float rounding on the last subtraction.
        return variants[0]
