"""Turn unstructured model output into a vocabulary list, definition or quiz."""
from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from vocab_proxy.models import (
    DEFINITION,
    QUIZ,
    QUIZ_KEYS,
    UNPARSEABLE,
    VOCAB_LIST,
    Definition,
    ExtractionOutcome,
    Fallback,
    GenerationRequest,
    Quiz,
    Success,
    VocabList,
)
from vocab_proxy.prompts import build_request

if TYPE_CHECKING:
    from vocab_proxy.providers.base import LLMProvider

_log = logging.getLogger("vocab_proxy.extractor")

DEFINITION_UNAVAILABLE = "Definition unavailable."


class MalformedResponse(ValueError):
    """Raw text parsed (or failed to parse) into something other than the expected shape."""


def _parse_vocab_list(raw: str) -> VocabList:
    try:
        data = json.loads(raw)
        # Some providers return the array double-encoded as a JSON string
        if isinstance(data, str):
            data = json.loads(data)
    except (ValueError, RecursionError) as e:
        raise MalformedResponse(f"not JSON: {e}") from e
    if not isinstance(data, list):
        raise MalformedResponse(f"expected a list, got {type(data).__name__}")
    if not data:
        raise MalformedResponse("empty word list")
    if not all(isinstance(w, str) for w in data):
        raise MalformedResponse("word list contains non-string items")
    return VocabList(words=data)


def _load_object(raw: str, required: tuple[str, ...]) -> dict:
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise MalformedResponse(f"not JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedResponse(f"expected an object, got {type(data).__name__}")
    missing = [k for k in required if k not in data]
    if missing:
        raise MalformedResponse(f"missing fields: {', '.join(missing)}")
    return data


def _parse_definition(raw: str) -> Definition:
    data = _load_object(raw, ("word", "definition"))
    return Definition(word=data["word"], definition=data["definition"])


def _parse_quiz(raw: str) -> Quiz:
    data = _load_object(raw, ("question", "options", "correctAnswer"))
    options = data["options"]
    if not isinstance(options, dict):
        raise MalformedResponse(f"options must be an object, got {type(options).__name__}")
    if set(options) != set(QUIZ_KEYS):
        raise MalformedResponse(f"options must have keys A-D (got {sorted(options)})")
    answer = data["correctAnswer"]
    if answer not in QUIZ_KEYS:
        raise MalformedResponse(f"correctAnswer not one of A-D: {answer!r}")
    return Quiz(question=data["question"], options=options, correct_answer=answer)


PARSERS = {
    VOCAB_LIST: _parse_vocab_list,
    DEFINITION: _parse_definition,
    QUIZ: _parse_quiz,
}


def flatten_text(raw: str) -> str:
    """Best-effort readable text: newlines become spaces, ends trimmed."""
    text = raw.replace("\n", " ").strip()
    return text or DEFINITION_UNAVAILABLE


def interpret(raw: str, shape: str, word: str | None = None, log: logging.Logger | None = None) -> ExtractionOutcome:
    """Interpret *raw* as *shape*; never raises for malformed text."""
    log = log or _log
    try:
        parser = PARSERS[shape]
    except KeyError:
        raise ValueError(f"Unknown shape: {shape}") from None

    try:
        return Success(parser(raw))
    except MalformedResponse as e:
        log.warning("Unparseable %s response: %s", shape, e)
        log.debug("  Raw response: %.500s", raw)

    payload = None
    if shape == DEFINITION:
        payload = Definition(word=word or "", definition=flatten_text(raw))
    return Fallback(reason=UNPARSEABLE, raw_text=raw, payload=payload)


async def extract(
    llm: LLMProvider,
    request: GenerationRequest,
    shape: str,
    word: str | None = None,
    log: logging.Logger | None = None,
) -> ExtractionOutcome:
    """Dispatch *request* once and interpret the completion as *shape*.

    ``TransportError`` from the provider propagates: it means the model
    could not be asked at all, which callers must tell apart from a
    ``Fallback`` (the model answered but the answer had no usable shape).
    """
    log = log or _log
    if shape not in PARSERS:
        raise ValueError(f"Unknown shape: {shape}")

    log.info("Dispatching %s request to %s", shape, llm.name())
    result = await llm.complete(request)
    log.debug("  Raw response: %.500s", result.raw_text)

    outcome = interpret(result.raw_text, shape, word=word, log=log)
    if isinstance(outcome, Success):
        log.info("  %s OK", shape)
    return outcome


async def extract_for_word(
    llm: LLMProvider,
    word: str | None,
    shape: str,
    count: int = 10,
    log: logging.Logger | None = None,
) -> ExtractionOutcome:
    request = build_request(shape, word=word, count=count)
    return await extract(llm, request, shape, word=word, log=log)
