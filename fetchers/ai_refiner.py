"""AI-powered topic refinement using OpenAI and Claude APIs."""

import logging
import random
import time
from typing import List, Optional, Sequence

import anthropic
import openai

from trend_engine.config import Settings
from trend_engine.models import RawSkill, Topic
from trend_engine.parsing import Unparseable, normalize_topics, parse_refinement

MAX_PROMPT_SKILLS = 15

SYSTEM_PROMPT = (
    "You are an expert on LinkedIn content trends and professional engagement. "
    "Respond only with valid JSON."
)


def get_logger():
    """Get configured logger."""
    return logging.getLogger(__name__)


class AITopicRefiner:
    """Turns raw skill keywords into polished LinkedIn topics with an LLM."""

    def __init__(
        self,
        settings: Settings,
        rng: Optional[random.Random] = None,
        openai_client=None,
        claude_client=None,
    ):
        """Initialize the refiner.

        Args:
            settings: provides the API keys, model names and preferred provider
            rng: source for the synthetic engagement/growth scores
            openai_client: pre-built OpenAI client (built from settings if omitted)
            claude_client: pre-built Anthropic client (built from settings if omitted)
        """
        self.settings = settings
        self.rng = rng or random.Random()
        self.logger = get_logger()

        if openai_client is None and settings.openai_api_key:
            openai_client = openai.OpenAI(api_key=settings.openai_api_key)
        if claude_client is None and settings.anthropic_api_key:
            claude_client = anthropic.Anthropic(api_key=settings.anthropic_api_key)
        self.openai_client = openai_client
        self.claude_client = claude_client

    @property
    def available(self) -> bool:
        return self.openai_client is not None or self.claude_client is not None

    def _get_refinement_prompt(self, skills: Sequence[RawSkill]) -> str:
        """Generate the AI prompt for topic refinement."""
        skills_text = ", ".join(skill.name for skill in skills[:MAX_PROMPT_SKILLS])
        return f"""These professional skills are currently common on LinkedIn profiles: {skills_text}

Turn them into exactly 8 trending LinkedIn post topics that professionals would find valuable.

Return a JSON object in this exact format:
{{
  "topics": [
    {{
      "title": "short, engaging topic title",
      "description": "one sentence (15-20 words) on what people are discussing",
      "hashtags": ["#Hashtag1", "#Hashtag2", "#Hashtag3"],
      "keywords": ["related topic 1", "related topic 2", "related topic 3"]
    }}
  ]
}}

Use 2-3 hashtags and up to 3 related keywords per topic. Return ONLY the JSON response, no other text."""

    def _call_openai(self, prompt: str) -> Optional[str]:
        """Call OpenAI API."""
        if self.openai_client is None:
            return None

        try:
            response = self.openai_client.chat.completions.create(
                model=self.settings.llm_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=0.7,
                response_format={"type": "json_object"},
            )
            return response.choices[0].message.content

        except Exception as e:
            self.logger.error(f"OpenAI API call failed: {e}")
            return None

    def _call_claude(self, prompt: str) -> Optional[str]:
        """Call Claude API."""
        if self.claude_client is None:
            return None

        try:
            response = self.claude_client.messages.create(
                model=self.settings.claude_model,
                max_tokens=2000,
                temperature=0.7,
                system=SYSTEM_PROMPT,
                messages=[
                    {"role": "user", "content": prompt},
                ],
            )
            return response.content[0].text

        except Exception as e:
            self.logger.error(f"Claude API call failed: {e}")
            return None

    def refine(self, skills: Sequence[RawSkill]) -> List[Topic]:
        """Refine *skills* into topics.

        Returns an empty list when no provider is configured, every provider
        fails, or the reply cannot be parsed; the caller then uses the
        deterministic refiner.
        """
        if not self.available or not skills:
            return []

        start_time = time.time()
        prompt = self._get_refinement_prompt(skills)

        apis_to_try = ["openai", "claude"]
        if self.settings.preferred_api == "claude":
            apis_to_try.reverse()

        response_text = None
        for api in apis_to_try:
            response_text = self._call_openai(prompt) if api == "openai" else self._call_claude(prompt)
            if response_text:
                self.logger.info(f"Got refinement response from {api}")
                break

        if not response_text:
            self.logger.error("All AI APIs failed, using standard refinement")
            return []

        parsed = parse_refinement(response_text)
        if isinstance(parsed, Unparseable):
            self.logger.warning(f"Discarding AI refinement: {parsed.reason}")
            self.logger.debug(f"Raw response: {response_text}")
            return []

        topics = normalize_topics(parsed, self.rng)
        elapsed = time.time() - start_time
        self.logger.info(f"AI refinement produced {len(topics)} topics in {elapsed:.1f}s")
        return topics
