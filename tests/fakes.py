"""Fakes shared by the test modules."""
import json
from datetime import datetime, timezone
from types import SimpleNamespace

import httpx

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

SKILL_NAMES = [
    "Cloud Computing",
    "Leadership",
    "Public Speaking",
    "Machine Learning",
    "Strategic Planning",
    "Data Analysis",
    "Product Management",
    "Negotiation",
    "Team Building",
    "Python",
]


class FakeChatClient:
    """Stand-in for ``openai.OpenAI`` returning canned completions."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeClaudeClient:
    """Stand-in for ``anthropic.Anthropic`` returning canned messages."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []
        self.messages = SimpleNamespace(create=self._create)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(content=[SimpleNamespace(text=self.text)])


def skills_transport(names=SKILL_NAMES, status_code=200, calls=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status_code, json={"skills": [{"name": name} for name in names]})

    return httpx.MockTransport(handler)


def ai_reply(count=8):
    return json.dumps({
        "topics": [
            {
                "title": f"AI Topic {n}",
                "description": f"Description {n}",
                "hashtags": [f"#Tag{n}", "#Leadership"],
                "keywords": [f"Keyword {n}"],
            }
            for n in range(1, count + 1)
        ]
    })
