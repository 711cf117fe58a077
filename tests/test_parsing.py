import json
import random

from trend_engine.parsing import (
    ParsedTopicList,
    ParsedTopicsWrapper,
    Unparseable,
    normalize_topics,
    parse_refinement,
)


def test_parse_bare_array() -> None:
    parsed = parse_refinement('[{"title": "Remote Work"}]')
    assert isinstance(parsed, ParsedTopicList)
    assert parsed.items == [{"title": "Remote Work"}]


def test_parse_wrapper_inside_code_fence() -> None:
    text = '```json\n{"topics": [{"title": "AI Ethics"}]}\n```'
    parsed = parse_refinement(text)
    assert isinstance(parsed, ParsedTopicsWrapper)
    assert parsed.items[0]["title"] == "AI Ethics"


def test_parse_failures_are_unparseable() -> None:
    for text in ["", "not json", '{"items": []}', '{"topics": "nope"}', '["just", "strings"]', "42"]:
        assert isinstance(parse_refinement(text), Unparseable), text


def test_normalize_unparseable_is_empty() -> None:
    assert normalize_topics(Unparseable("bad"), random.Random(1)) == []


def test_normalize_fills_missing_fields() -> None:
    parsed = parse_refinement(json.dumps([{}, {"title": "Green Tech", "hashtags": ["Green Tech", "#Green Tech"]}]))
    first, second = normalize_topics(parsed, random.Random(1))

    assert first.id == 1
    assert first.topic == "Professional Topic 1"
    assert first.description
    assert first.hashtags == ["#Professional1", "#LinkedInStrategy"]
    assert first.related_topics == ["Professional Development"]

    assert second.id == 2
    assert second.topic == "Green Tech"
    assert second.hashtags == ["#GreenTech", "#LinkedInStrategy"]


def test_normalize_caps_topics_and_lists() -> None:
    items = [
        {
            "title": f"T{n}",
            "hashtags": ["#a", "#b", "#c", "#d"],
            "keywords": ["k1", "k2", "k3", "k4"],
        }
        for n in range(12)
    ]
    topics = normalize_topics(ParsedTopicList(items=items), random.Random(3))

    assert len(topics) == 8
    assert [t.id for t in topics] == list(range(1, 9))
    for topic in topics:
        assert topic.hashtags == ["#a", "#b", "#c"]
        assert topic.related_topics == ["k1", "k2", "k3"]
        assert 75 <= topic.engagement <= 94
        assert 5 <= topic.growth <= 24


def test_normalize_tops_up_single_hashtag() -> None:
    parsed = parse_refinement('[{"title": "X", "hashtags": ["#Only"]}, {"title": "Y", "hashtags": ["#LinkedInStrategy"]}]')
    first, second = normalize_topics(parsed, random.Random(0))

    assert first.hashtags == ["#Only", "#LinkedInStrategy"]
    assert second.hashtags == ["#LinkedInStrategy", "#Professional2"]
