import random

import httpx
import pytest

from fakes import skills_transport
from fetchers.skills_fetcher import SkillsFetcher
from trend_engine.config import ConfigurationError, Settings
from trend_engine.defaults import SEED_PROFILES


def test_fetch_sends_seed_and_credentials(settings) -> None:
    calls = []
    fetcher = SkillsFetcher(settings, client=httpx.Client(transport=skills_transport(["SQL", "Go"], calls=calls)))

    skills = fetcher.fetch("reidhoffman")

    assert [s.name for s in skills] == ["SQL", "Go"]
    request = calls[0]
    assert request.url.params["username"] == "reidhoffman"
    assert request.headers["x-rapidapi-key"] == "skills-key"
    assert request.headers["x-rapidapi-host"] == settings.skills_api_host


def test_fetch_skips_entries_without_names(settings) -> None:
    payload = {"skills": [{"name": " Design "}, {"title": "no name"}, "junk", {"name": ""}, {"name": 3}]}
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
    fetcher = SkillsFetcher(settings, client=httpx.Client(transport=transport))

    assert [s.name for s in fetcher.fetch("adamgrant")] == ["Design"]


def test_fetch_without_skills_key_returns_empty(settings) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"profile": {}}))
    fetcher = SkillsFetcher(settings, client=httpx.Client(transport=transport))
    assert fetcher.fetch("adamgrant") == []


def test_non_success_status_raises_without_retry(settings) -> None:
    calls = []
    fetcher = SkillsFetcher(settings, client=httpx.Client(transport=skills_transport(status_code=503, calls=calls)))

    with pytest.raises(httpx.HTTPStatusError):
        fetcher.fetch("adamgrant")
    assert len(calls) == 1


def test_missing_credential_is_a_configuration_error() -> None:
    fetcher = SkillsFetcher(Settings(), client=httpx.Client(transport=skills_transport()))
    with pytest.raises(ConfigurationError):
        fetcher.fetch("adamgrant")


def test_seed_choice_is_reproducible(settings) -> None:
    first = SkillsFetcher(settings, rng=random.Random(42)).choose_seed()
    second = SkillsFetcher(settings, rng=random.Random(42)).choose_seed()

    assert first == second
    assert first in SEED_PROFILES
