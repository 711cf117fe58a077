from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

import httpx

from trend_engine.config import Settings
from trend_engine.defaults import SEED_PROFILES
from trend_engine.models import RawSkill

logger = logging.getLogger(__name__)


class SkillsFetcher:
    """Fetch the skill keywords of a randomly chosen seed profile.

    One GET per call and no retries: transport errors and non-2xx responses
    propagate to the caller.
    """

    def __init__(
        self,
        settings: Settings,
        rng: Optional[random.Random] = None,
        client: Optional[httpx.Client] = None,
        seeds: Sequence[str] = SEED_PROFILES,
    ):
        self.settings = settings
        self.rng = rng or random.Random()
        self.client = client or httpx.Client(timeout=30.0)
        self.seeds = list(seeds)

    def choose_seed(self) -> str:
        return self.rng.choice(self.seeds)

    def fetch(self, seed: str) -> List[RawSkill]:
        """Return the skills listed on *seed*'s profile."""
        headers = {
            "x-rapidapi-key": self.settings.require_skills_api_key(),
            "x-rapidapi-host": self.settings.skills_api_host,
        }
        logger.info(f"Requesting skills for seed profile '{seed}'")
        response = self.client.get(self.settings.skills_api_url, params={"username": seed}, headers=headers)
        response.raise_for_status()

        payload = response.json()
        raw = payload.get("skills") if isinstance(payload, dict) else None
        skills = [
            RawSkill(name=item["name"].strip())
            for item in raw or []
            if isinstance(item, dict) and isinstance(item.get("name"), str) and item["name"].strip()
        ]
        logger.info(f"Fetched {len(skills)} skills for '{seed}'")
        return skills

    def fetch_random(self) -> List[RawSkill]:
        return self.fetch(self.choose_seed())
