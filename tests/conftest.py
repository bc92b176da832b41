"""
Shared fixtures for Khayrah tests.
"""

import json

import pytest
from fastapi.testclient import TestClient

from khayrah import server
from khayrah.server import app


SAMPLE_REPLY = {
    "mapped": {
        "feeling": "anxious",
        "quran": {"en": "Verily, with hardship comes ease.", "ref": "Q 94:5–6"},
        "quran2": {"en": "Allah does not burden a soul beyond its capacity.", "ref": "Q 2:286"},
        "hadith": {"en": "Be mindful of Allah and He will protect you.", "ref": "Tirmidhi 2516"},
        "counsel": {"by": "Ibn al-Qayyim (adapted)", "text": "Turn worry into dhikr."},
        "dua": "حَسْبِيَ اللَّهُ",
    },
    "peptalk": "One breath, one step.",
    "suggestions": ["worried", "restless"],
}


class FakeMessage:
    def __init__(self, content):
        self.content = content


class FakeChatModel:
    """Stands in for the chat model; records the messages it receives."""

    def __init__(self, content=None, error=None):
        self.content = json.dumps(SAMPLE_REPLY, ensure_ascii=False) if content is None else content
        self.error = error
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return FakeMessage(self.content)


@pytest.fixture
def sample_reply():
    return json.loads(json.dumps(SAMPLE_REPLY))


@pytest.fixture
def fake_model():
    return FakeChatModel()


@pytest.fixture
def client(monkeypatch, fake_model):
    monkeypatch.setenv("GEMINI_AI_API_KEY", "test-key")
    monkeypatch.setattr(server, "build_model", lambda settings: fake_model)
    with TestClient(app) as test_client:
        yield test_client
