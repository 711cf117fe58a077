"""Deterministic skill-to-topic transform used when AI refinement is unavailable."""

import logging
import random
from typing import List, Optional, Sequence

from trend_engine.defaults import DEFAULT_TOPIC_NAMES, TRENDING_HASHTAGS
from trend_engine.hashtags import dedupe, to_hashtag
from trend_engine.models import MAX_TOPICS, RawSkill, Topic
from trend_engine.scoring import synthetic_scores


class StandardTopicRefiner:
    """Turns the first few raw skills into topics using fixed templates."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.logger = logging.getLogger(__name__)
        self.rng = rng or random.Random()

    def _label(self, skill: RawSkill, index: int) -> str:
        return skill.name.strip() or DEFAULT_TOPIC_NAMES[index % len(DEFAULT_TOPIC_NAMES)]

    def _related(self, skills: Sequence[RawSkill], index: int, label: str) -> List[str]:
        """Up to three sibling skill names, topped up with cycled default names."""
        related = dedupe(
            skill.name.strip() for other, skill in enumerate(skills)
            if other != index and skill.name.strip() != label
        )[:3]

        offset = 1
        while len(related) < 3 and offset <= len(DEFAULT_TOPIC_NAMES):
            candidate = DEFAULT_TOPIC_NAMES[(index + offset) % len(DEFAULT_TOPIC_NAMES)]
            if candidate != label and candidate not in related:
                related.append(candidate)
            offset += 1
        return related

    def _hashtags(self, label: str, skill: RawSkill, index: int) -> List[str]:
        """Two or three distinct tags, topped up from the cycled pool when they collapse."""
        pool_size = len(TRENDING_HASHTAGS)
        hashtags = dedupe([
            to_hashtag(label),
            TRENDING_HASHTAGS[index % pool_size],
            to_hashtag(skill.name),
        ])[:3]

        offset = 1
        while len(hashtags) < 2 and offset < pool_size:
            candidate = TRENDING_HASHTAGS[(index + offset) % pool_size]
            if candidate not in hashtags:
                hashtags.append(candidate)
            offset += 1
        return hashtags

    def refine(self, skills: Sequence[RawSkill]) -> List[Topic]:
        """Build at most eight topics from *skills*, in skill order."""
        topics = []
        for index, skill in enumerate(skills[:MAX_TOPICS]):
            label = self._label(skill, index)
            hashtags = self._hashtags(label, skill, index)
            engagement, growth = synthetic_scores(self.rng)
            topics.append(Topic(
                id=index + 1,
                topic=label,
                description=f"Trending discussions about {label} in professional settings",
                engagement=engagement,
                growth=growth,
                hashtags=hashtags,
                related_topics=self._related(skills, index, label),
            ))

        self.logger.info(f"Standard refinement produced {len(topics)} topics")
        return topics
