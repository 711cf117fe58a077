import random

import httpx
import pytest

from fakes import NOW, skills_transport
from fetchers.ai_refiner import AITopicRefiner
from fetchers.skills_fetcher import SkillsFetcher
from fetchers.standard_refiner import StandardTopicRefiner
from trend_engine.cache import JsonlSnapshotStore
from trend_engine.config import Settings
from trend_engine.pipeline import TrendPipeline


@pytest.fixture
def settings(tmp_path):
    return Settings(
        skills_api_key="skills-key",
        skills_api_url="https://skills.test/profile",
        cache_path=tmp_path / "trend_cache.jsonl",
    )


@pytest.fixture
def store(settings):
    return JsonlSnapshotStore(settings.cache_path)


@pytest.fixture
def make_pipeline(settings, store):
    """Build a pipeline with a mocked skills API and an optional fake LLM client."""

    def _make(transport=None, openai_client=None, clock=lambda: NOW, seed=7, pipeline_store=None):
        rng = random.Random(seed)
        fetcher = SkillsFetcher(
            settings,
            rng=rng,
            client=httpx.Client(transport=transport or skills_transport()),
        )
        return TrendPipeline(
            settings=settings,
            store=pipeline_store if pipeline_store is not None else store,
            fetcher=fetcher,
            ai_refiner=AITopicRefiner(settings, rng=rng, openai_client=openai_client),
            standard_refiner=StandardTopicRefiner(rng=rng),
            clock=clock,
        )

    return _make
