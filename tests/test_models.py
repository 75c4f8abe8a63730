"""Tests for data models."""
from __future__ import annotations

import dataclasses

import pytest

from vocab_proxy.models import (
    Definition,
    Fallback,
    GenerationRequest,
    Quiz,
    Success,
    VocabList,
)


class TestGenerationRequest:
    def test_create(self):
        r = GenerationRequest("You create quizzes.", "Make one.", temperature=0.3, max_output_tokens=300)
        assert r.system_instruction == "You create quizzes."
        assert r.user_prompt == "Make one."
        assert r.temperature == 0.3
        assert r.max_output_tokens == 300

    def test_messages(self):
        r = GenerationRequest("sys", "usr")
        assert r.messages() == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "usr"},
        ]

    def test_immutable(self):
        r = GenerationRequest("sys", "usr")
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.temperature = 1.0

    @pytest.mark.parametrize("temperature", [-0.1, 2.01])
    def test_temperature_range(self, temperature):
        with pytest.raises(ValueError):
            GenerationRequest("sys", "usr", temperature=temperature)

    def test_temperature_bounds_inclusive(self):
        GenerationRequest("sys", "usr", temperature=0.0)
        GenerationRequest("sys", "usr", temperature=2.0)

    @pytest.mark.parametrize("tokens", [0, -5, 1.5, True])
    def test_max_tokens_positive_int(self, tokens):
        with pytest.raises(ValueError):
            GenerationRequest("sys", "usr", max_output_tokens=tokens)


class TestPayloads:
    def test_vocab_to_dict(self):
        assert VocabList(["abate"]).to_dict() == {"words": ["abate"]}

    def test_definition_to_dict(self):
        assert Definition("abate", "to lessen").to_dict() == {"word": "abate", "definition": "to lessen"}

    def test_quiz_uses_frontend_key(self):
        q = Quiz("Q?", {"A": "a", "B": "b", "C": "c", "D": "d"}, "C")
        d = q.to_dict()
        assert d["correctAnswer"] == "C"
        assert "correct_answer" not in d


class TestOutcomes:
    def test_success(self):
        s = Success(VocabList(["abate"]))
        assert s.payload.words == ["abate"]

    def test_fallback_default_payload(self):
        f = Fallback("unparseable", "raw text")
        assert f.payload is None
        assert f.raw_text == "raw text"
