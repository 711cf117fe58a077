"""Synthetic plausibility scores for generated topics.

The values are random fill for the UI cards. They are not derived from any
measurement and carry no real-world meaning.
"""
from __future__ import annotations

import random
from typing import Tuple

ENGAGEMENT_RANGE = (75, 94)
GROWTH_RANGE = (5, 24)


def synthetic_scores(rng: random.Random) -> Tuple[int, int]:
    """Return an ``(engagement, growth)`` pair drawn from *rng*."""
    return rng.randint(*ENGAGEMENT_RANGE), rng.randint(*GROWTH_RANGE)
