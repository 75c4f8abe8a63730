"""Shared test fixtures."""
from __future__ import annotations

import json

import pytest

from vocab_proxy.models import GenerationResult
from vocab_proxy.providers.base import TransportError


class FakeLLM:
    """Fake provider returning canned completions (or raising) in order."""

    def __init__(self, responses=None, error: Exception | None = None):
        self._responses = responses or [""]
        self._error = error
        self.requests = []

    async def complete(self, request):
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        idx = min(len(self.requests) - 1, len(self._responses) - 1)
        return GenerationResult(raw_text=self._responses[idx])

    def name(self) -> str:
        return "fake-llm"

    @property
    def call_count(self):
        return len(self.requests)


@pytest.fixture
def fake_llm_factory():
    return FakeLLM


@pytest.fixture
def rate_limited():
    return TransportError("OpenAI returned HTTP 429", status_code=429, details="Rate limit reached")


@pytest.fixture
def quiz_data():
    return {
        "question": "What is the best definition of 'abate'?",
        "options": {
            "A": "To increase in intensity",
            "B": "To become less intense",
            "C": "To confuse or perplex",
            "D": "To support or encourage",
        },
        "correctAnswer": "B",
    }


@pytest.fixture
def quiz_json(quiz_data):
    return json.dumps(quiz_data, indent=2)


@pytest.fixture
def wordsapi_definitions():
    """Shape of a WordsAPI /words/{word}/definitions response."""
    return {
        "word": "abate",
        "definitions": [
            {"definition": "become less in amount or intensity", "partOfSpeech": "verb"},
            {"definition": "make less active or intense", "partOfSpeech": "verb"},
        ],
    }
