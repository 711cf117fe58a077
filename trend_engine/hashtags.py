"""Hashtag normalisation and aggregation."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from .defaults import TRENDING_HASHTAGS
from .models import MAX_HASHTAGS, Topic


def to_hashtag(text: str) -> str:
    """Return *text* as a ``#``-prefixed tag with whitespace removed, or ``""``."""
    compact = "".join(str(text).split())
    if not compact.lstrip("#"):
        return ""
    return compact if compact.startswith("#") else f"#{compact}"


def dedupe(items: Iterable[str]) -> List[str]:
    """Drop empties and exact duplicates, keeping first-seen order."""
    seen = set()
    unique: List[str] = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def aggregate_hashtags(
    topics: Sequence[Topic],
    baseline: Sequence[str] = TRENDING_HASHTAGS,
    limit: int = MAX_HASHTAGS,
) -> List[str]:
    """Flatten topic hashtags, append the baseline pool, dedupe and cap at *limit*."""
    flattened = [tag for topic in topics for tag in topic.hashtags]
    return dedupe([*flattened, *baseline])[:limit]
