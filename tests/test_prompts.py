"""Tests for prompt templates and request building."""
from __future__ import annotations

import pytest

from vocab_proxy.models import DEFINITION, QUIZ, VOCAB_LIST
from vocab_proxy.prompts import (
    DEFINITION_PROMPT,
    QUIZ_PROMPT,
    QUIZ_SYSTEM,
    VOCAB_LIST_PROMPT,
    build_request,
)


class TestPromptTemplates:
    def test_quiz_prompt_formats(self):
        result = QUIZ_PROMPT.format(word="abate")
        assert '"abate"' in result
        assert '"correctAnswer": "B"' in result
        assert "{word}" not in result

    def test_definition_prompt_formats(self):
        result = DEFINITION_PROMPT.format(word="acrimony")
        assert '"word": "acrimony"' in result
        assert '"definition"' in result

    def test_vocab_prompt_formats(self):
        result = VOCAB_LIST_PROMPT.format(count=5)
        assert "List 5 distinct" in result
        assert "JSON array" in result


class TestBuildRequest:
    def test_quiz(self):
        r = build_request(QUIZ, word="abate")
        assert r.system_instruction == QUIZ_SYSTEM
        assert r.temperature == 0.3
        assert r.max_output_tokens == 300
        assert "abate" in r.user_prompt

    def test_definition(self):
        r = build_request(DEFINITION, word="abate")
        assert r.max_output_tokens == 200

    def test_vocab_list_needs_no_word(self):
        r = build_request(VOCAB_LIST, count=7)
        assert "List 7" in r.user_prompt

    def test_word_required(self):
        with pytest.raises(ValueError):
            build_request(QUIZ)

    def test_unknown_shape(self):
        with pytest.raises(ValueError):
            build_request("crossword", word="abate")
