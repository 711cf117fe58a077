"""Free-text LinkedIn topic ideas from an OpenAI chat completion."""
from __future__ import annotations

import logging
import re
from typing import List, Optional

import openai

from trend_engine.config import ConfigurationError, Settings
from trend_engine.models import TopicSuggestion

MAX_SUGGESTIONS = 6
DEFAULT_ICON = "✨"

SYSTEM_PROMPT = (
    "You are an expert on LinkedIn engagement and professional content. Generate 6 high-quality "
    "LinkedIn post topic ideas that professionals would find valuable and engaging. Each topic "
    "should be specific, actionable, and formatted with an emoji icon, title, and brief description."
)

_TITLE_LINE = re.compile(r"^(.*?):\s*(.*?)$")
_LIST_MARKER = re.compile(r"^\s*(?:\d+[.)]|[-*•])\s+")
_LEADING_ICON = re.compile(r"^([^\w\s]+)\s+(.*)$")

logger = logging.getLogger(__name__)


def _clean_line(line: str) -> str:
    line = _LIST_MARKER.sub("", line.strip())
    return line.replace("**", "").replace("__", "").strip()


def _split_icon(title: str) -> tuple[str, str]:
    match = _LEADING_ICON.match(title)
    if match:
        return match.group(1), match.group(2).strip()
    return DEFAULT_ICON, title


def parse_suggestions(text: str) -> List[TopicSuggestion]:
    """Parse ``title: description`` lines; fall back to one topic per line."""
    lines = [_clean_line(line) for line in text.strip().splitlines()]
    lines = [line for line in lines if line]

    topics: List[TopicSuggestion] = []
    for line in lines:
        match = _TITLE_LINE.match(line)
        if not match or not match.group(1).strip():
            continue
        icon, label = _split_icon(match.group(1).strip())
        if not label:
            continue
        topic_id = len(topics) + 1
        topics.append(TopicSuggestion(
            id=topic_id,
            label=label,
            icon=icon,
            trending=topic_id <= 3,
            description=match.group(2).strip(),
        ))
        if len(topics) == MAX_SUGGESTIONS:
            break

    if not topics:
        for index, line in enumerate(lines[:MAX_SUGGESTIONS]):
            topics.append(TopicSuggestion(
                id=index + 1,
                label=line,
                icon=DEFAULT_ICON,
                trending=index + 1 <= 3,
                description="AI suggested LinkedIn topic",
            ))
    return topics


class TopicSuggester:
    """Asks the LLM for topic ideas, optionally around a user-supplied theme."""

    def __init__(self, settings: Settings, client=None):
        self.settings = settings
        if client is None and settings.openai_api_key:
            client = openai.OpenAI(api_key=settings.openai_api_key)
        self.client = client

    def suggest(self, user_input: Optional[str] = None) -> List[TopicSuggestion]:
        """Return up to six suggestions. Upstream errors propagate."""
        if self.client is None:
            raise ConfigurationError("OPENAI_API_KEY environment variable not set")

        user_prompt = (
            f"Generate LinkedIn post topic ideas related to: {user_input}"
            if user_input
            else "Generate trending LinkedIn post topic ideas for professionals"
        )
        response = self.client.chat.completions.create(
            model=self.settings.llm_model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
            temperature=0.7,
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ValueError("Invalid response from OpenAI API")

        topics = parse_suggestions(content)
        logger.info(f"Parsed {len(topics)} topic suggestions")
        return topics
