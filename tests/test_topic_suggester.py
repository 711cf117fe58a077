import pytest

from fakes import FakeChatClient
from fetchers.topic_suggester import TopicSuggester, parse_suggestions
from trend_engine.config import ConfigurationError, Settings


def test_parse_title_description_lines() -> None:
    text = """
1. **💡 Career Pivots**: Lessons from switching industries mid-career
2. Leadership: What great managers do differently
- 🌱 Sustainability at Work: Small habits with big impact
"""
    topics = parse_suggestions(text)

    assert [t.label for t in topics] == ["Career Pivots", "Leadership", "Sustainability at Work"]
    assert [t.icon for t in topics] == ["💡", "✨", "🌱"]
    assert topics[1].description == "What great managers do differently"
    assert [t.trending for t in topics] == [True, True, True]


def test_parse_caps_at_six_and_marks_first_three_trending() -> None:
    text = "\n".join(f"Topic {n}: description {n}" for n in range(1, 10))
    topics = parse_suggestions(text)

    assert len(topics) == 6
    assert [t.id for t in topics] == [1, 2, 3, 4, 5, 6]
    assert [t.trending for t in topics] == [True, True, True, False, False, False]


def test_parse_falls_back_to_plain_lines() -> None:
    topics = parse_suggestions("Networking tips\n\nMentorship stories\n")

    assert [t.label for t in topics] == ["Networking tips", "Mentorship stories"]
    assert all(t.description == "AI suggested LinkedIn topic" for t in topics)
    assert all(t.icon == "✨" for t in topics)


def test_suggest_uses_user_input_in_prompt() -> None:
    client = FakeChatClient(content="Remote Work: Hybrid teams")
    topics = TopicSuggester(Settings(), client=client).suggest("remote teams")

    assert topics[0].label == "Remote Work"
    assert client.calls[0]["messages"][1]["content"] == "Generate LinkedIn post topic ideas related to: remote teams"


def test_suggest_generic_prompt_without_input() -> None:
    client = FakeChatClient(content="Remote Work: Hybrid teams")
    TopicSuggester(Settings(), client=client).suggest()

    assert client.calls[0]["messages"][1]["content"] == "Generate trending LinkedIn post topic ideas for professionals"


def test_suggest_requires_openai_key() -> None:
    with pytest.raises(ConfigurationError):
        TopicSuggester(Settings()).suggest("anything")


def test_empty_completion_raises() -> None:
    with pytest.raises(ValueError):
        TopicSuggester(Settings(), client=FakeChatClient(content="")).suggest()
