"""Trend-suggestion pipeline.

Stages run strictly in order:

1. cache read (a fresh snapshot short-circuits everything else)
2. skills fetch for a random seed profile
3. topic refinement (AI when a credential exists, deterministic otherwise)
4. hashtag aggregation
5. cache write (append-only, failures ignored)
6. response assembly

A failed skills fetch returns the static default snapshot tagged
``source="fallback"``. Only a missing skills credential is fatal.
"""
from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Callable, List, Optional

from fetchers.ai_refiner import AITopicRefiner
from fetchers.skills_fetcher import SkillsFetcher
from fetchers.standard_refiner import StandardTopicRefiner

from .cache import CacheReader, CacheWriter, SnapshotStore, build_store
from .config import Settings
from .defaults import FALLBACK_HASHTAGS, FALLBACK_TOPICS
from .hashtags import aggregate_hashtags
from .models import MAX_TOPICS, RawSkill, Topic, TrendResponse, TrendSnapshot

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def fallback_response(now: datetime) -> TrendResponse:
    """The hard-coded safety net served when live data is unavailable."""
    return TrendResponse(
        trends=[Topic.model_validate(topic) for topic in FALLBACK_TOPICS],
        hashtags=list(FALLBACK_HASHTAGS),
        source="fallback",
        updated_at=now,
    )


class TrendPipeline:
    """Cache-fronted pipeline turning seed-profile skills into topics and hashtags."""

    def __init__(
        self,
        settings: Settings,
        store: SnapshotStore,
        fetcher: SkillsFetcher,
        ai_refiner: AITopicRefiner,
        standard_refiner: StandardTopicRefiner,
        clock: Clock = utc_now,
    ):
        self.settings = settings
        self.reader = CacheReader(store)
        self.writer = CacheWriter(store)
        self.fetcher = fetcher
        self.ai_refiner = ai_refiner
        self.standard_refiner = standard_refiner
        self.clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        rng: Optional[random.Random] = None,
        store: Optional[SnapshotStore] = None,
        clock: Clock = utc_now,
    ) -> "TrendPipeline":
        rng = rng or random.Random()
        return cls(
            settings=settings,
            store=store if store is not None else build_store(settings),
            fetcher=SkillsFetcher(settings, rng=rng),
            ai_refiner=AITopicRefiner(settings, rng=rng),
            standard_refiner=StandardTopicRefiner(rng=rng),
            clock=clock,
        )

    def refine(self, skills: List[RawSkill]) -> List[Topic]:
        """AI refinement first, deterministic transform when it yields nothing."""
        topics: List[Topic] = []
        if self.ai_refiner.available:
            topics = self.ai_refiner.refine(skills)
        if not topics:
            topics = self.standard_refiner.refine(skills)
        return topics[:MAX_TOPICS]

    def run(self, force_refresh: bool = False) -> TrendResponse:
        """Return trend suggestions, recomputing when the cache is stale.

        ``force_refresh`` skips the cache read but still writes the new snapshot.

        Raises:
            ConfigurationError: the skills API credential is missing
        """
        self.settings.require_skills_api_key()
        now = self.clock()

        if force_refresh:
            logger.info("Force refresh requested, skipping cache")
        else:
            cached = self.reader.read_fresh(now)
            if cached is not None:
                return TrendResponse.from_snapshot(cached, source="cache")

        try:
            skills = self.fetcher.fetch_random()
            if not skills:
                raise ValueError("skills lookup returned no skills")
            topics = self.refine(skills)
        except Exception as e:
            logger.error(f"Trend computation failed, serving default topics: {e}")
            return fallback_response(now)

        snapshot = TrendSnapshot(topics=topics, hashtags=aggregate_hashtags(topics), created_at=now)
        self.writer.write(snapshot)
        return TrendResponse.from_snapshot(snapshot, source="api")
