"""Defensive parsing of LLM topic-refinement replies.

The model is asked for JSON, but the reply is untrusted text. It is first
classified into one of three shapes:

``ParsedTopicList``
    a bare JSON array of topic objects.
``ParsedTopicsWrapper``
    a JSON object whose ``topics`` key holds that array.
``Unparseable``
    anything else (bad JSON, no array, non-object entries).

:func:`normalize_topics` then maps any of the three onto canonical
:class:`~trend_engine.models.Topic` objects. An ``Unparseable`` reply maps to an
empty list so callers fall back to the deterministic refiner instead of
returning a half-parsed topic list.
"""
from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .hashtags import dedupe, to_hashtag
from .models import MAX_TOPICS, Topic
from .scoring import synthetic_scores


@dataclass(frozen=True)
class ParsedTopicList:
    items: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedTopicsWrapper:
    items: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class Unparseable:
    reason: str


ParsedRefinement = Union[ParsedTopicList, ParsedTopicsWrapper, Unparseable]


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code block if the model added one."""
    clean = text.strip()
    if clean.startswith("```"):
        clean = clean[3:]
        if clean.lower().startswith("json"):
            clean = clean[4:]
    if clean.endswith("```"):
        clean = clean[:-3]
    return clean.strip()


def parse_refinement(text: Optional[str]) -> ParsedRefinement:
    """Classify a raw LLM reply into one of the three parse outcomes."""
    if not text or not text.strip():
        return Unparseable("empty response")

    try:
        data = json.loads(_strip_code_fence(text))
    except json.JSONDecodeError as exc:
        return Unparseable(f"invalid JSON: {exc}")

    if isinstance(data, list):
        items, shape = data, ParsedTopicList
    elif isinstance(data, dict) and isinstance(data.get("topics"), list):
        items, shape = data["topics"], ParsedTopicsWrapper
    else:
        return Unparseable("no topic array in response")

    if not all(isinstance(item, dict) for item in items):
        return Unparseable("topic array contains non-object entries")
    return shape(items=items)


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _topic_from_item(item: Dict[str, Any], index: int, rng: random.Random) -> Topic:
    n = index + 1
    title = _text(item.get("title")) or _text(item.get("topic")) or f"Professional Topic {n}"
    description = _text(item.get("description")) or (
        f"Professional insights and discussions about {title}"
    )

    hashtags = dedupe(to_hashtag(tag) for tag in _strings(item.get("hashtags")))[:3]
    if not hashtags:
        hashtags = [f"#Professional{n}", "#LinkedInStrategy"]
    for filler in ("#LinkedInStrategy", f"#Professional{n}"):
        if len(hashtags) >= 2:
            break
        if filler not in hashtags:
            hashtags.append(filler)

    related_raw = item.get("keywords") or item.get("relatedTopics") or item.get("related_topics")
    related = dedupe(_strings(related_raw))[:3] or ["Professional Development"]

    engagement, growth = synthetic_scores(rng)
    return Topic(
        id=n,
        topic=title,
        description=description,
        engagement=engagement,
        growth=growth,
        hashtags=hashtags,
        related_topics=related,
    )


def normalize_topics(
    parsed: ParsedRefinement,
    rng: random.Random,
    limit: int = MAX_TOPICS,
) -> List[Topic]:
    """Map a parse outcome onto at most *limit* canonical topics."""
    if isinstance(parsed, Unparseable):
        return []
    return [_topic_from_item(item, index, rng) for index, item in enumerate(parsed.items[:limit])]
