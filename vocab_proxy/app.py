"""FastAPI application with all routes."""
from __future__ import annotations

import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vocab_proxy.cache import VocabCache
from vocab_proxy.config import Settings, load_settings
from vocab_proxy.dictionary import DictionaryError, WordsAPIClient
from vocab_proxy.extractor import extract_for_word
from vocab_proxy.models import DEFINITION, QUIZ, VOCAB_LIST, Fallback, VocabList
from vocab_proxy.providers.base import TransportError

app = FastAPI(title="Vocab Proxy")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global state (initialized in startup)
_settings: Settings | None = None
_cache: VocabCache | None = None

_http_log = logging.getLogger("vocab_proxy.http")
_words_log = logging.getLogger("vocab_proxy.words")
_gen_log = logging.getLogger("vocab_proxy.generate")


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def get_cache() -> VocabCache:
    assert _cache is not None
    return _cache


def _get_llm():
    s = get_settings()
    if s.llm_provider == "openai":
        from vocab_proxy.providers.llm_openai import OpenAIProvider
        return OpenAIProvider(model=s.llm_model, timeout=s.request_timeout)
    elif s.llm_provider == "anthropic":
        from vocab_proxy.providers.llm_anthropic import AnthropicProvider
        return AnthropicProvider(model=s.llm_model, timeout=s.request_timeout)
    elif s.llm_provider == "ollama":
        from vocab_proxy.providers.llm_ollama import OllamaProvider
        return OllamaProvider(base_url=s.ollama_url, model=s.llm_model, timeout=s.request_timeout)
    raise ValueError(f"Unknown LLM provider: {s.llm_provider}")


def _get_dictionary() -> WordsAPIClient:
    s = get_settings()
    return WordsAPIClient(api_key=s.words_api_key, host=s.words_api_host, timeout=s.request_timeout)


REDACTED_HEADERS = {"authorization", "cookie", "proxy-authorization", "x-api-key", "x-rapidapi-key"}


def redact_headers(headers) -> dict:
    return {k: ("<redacted>" if k.lower() in REDACTED_HEADERS else v) for k, v in headers.items()}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    _http_log.debug("Incoming request: %s %s", request.method, request.url.path)
    _http_log.debug("Request headers: %s", redact_headers(request.headers))
    return await call_next(request)


@app.on_event("startup")
async def startup():
    global _settings, _cache
    if _settings is None:
        _settings = load_settings()
    if _cache is None:
        _cache = VocabCache(ttl_seconds=_settings.vocab_cache_ttl)
    log = logging.getLogger("vocab_proxy.startup")
    log.info("WORDS_API_KEY loaded? %s", bool(_settings.words_api_key))
    log.info("LLM provider: %s (key loaded? %s)", _settings.llm_provider, bool(_settings.llm_api_key))


def _error(status: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": error, **extra})


def _unparseable(outcome: Fallback) -> JSONResponse:
    return _error(500, "Failed to parse AI response JSON", reason=outcome.reason, raw=outcome.raw_text)


# ── API: Health ───────────────────────────────────────────────────────────

@app.get("/api/health")
async def api_health():
    s = get_settings()
    return {
        "status": "ok",
        "llm_provider": s.llm_provider,
        "words_api_key_loaded": bool(s.words_api_key),
    }


# ── API: Dictionary pass-through ──────────────────────────────────────────

async def _lookup(word: str, section: str | None):
    try:
        return await _get_dictionary().lookup(word, section=section)
    except DictionaryError as e:
        return _error(e.status_code, "WordsAPI request failed", details=e.details)
    except TransportError as e:
        _words_log.warning("Error fetching word data for '%s': %s", word, e)
        return _error(500, "Failed to fetch word data", details=str(e))


@app.get("/api/word")
async def api_word_default():
    return await _lookup(get_settings().default_word, section=None)


@app.get("/api/word/{word}")
async def api_word(word: str):
    return await _lookup(word, section="definitions")


# ── API: Generated content ────────────────────────────────────────────────

@app.get("/api/vocab")
async def api_vocab(count: int | None = Query(None, ge=1, le=50), refresh: bool = False):
    s = get_settings()
    cache = get_cache()
    n = count or s.vocab_count

    if not refresh:
        cached = cache.get(n)
        if cached is not None:
            _gen_log.info("Vocab list (%d) served from cache", n)
            return VocabList(cached).to_dict()

    try:
        outcome = await extract_for_word(_get_llm(), None, VOCAB_LIST, count=n, log=_gen_log)
    except TransportError as e:
        _gen_log.warning("Vocab generation failed: %s", e)
        return _error(500, "Failed to generate vocabulary list", details=str(e))

    if isinstance(outcome, Fallback):
        return _unparseable(outcome)
    cache.put(n, outcome.payload.words)
    return outcome.payload.to_dict()


@app.delete("/api/vocab/cache")
async def api_vocab_cache_clear():
    return {"cleared": get_cache().invalidate()}


@app.get("/api/definition/{word}")
async def api_definition(word: str):
    try:
        outcome = await extract_for_word(_get_llm(), word, DEFINITION, log=_gen_log)
    except TransportError as e:
        _gen_log.warning("Definition generation failed for '%s': %s", word, e)
        return _error(500, "Failed to generate definition", details=str(e))

    # Degraded text is still returned with 200 for definitions
    return outcome.payload.to_dict()


@app.get("/api/quiz/{word}")
async def api_quiz(word: str):
    try:
        outcome = await extract_for_word(_get_llm(), word, QUIZ, log=_gen_log)
    except TransportError as e:
        _gen_log.warning("Quiz generation failed for '%s': %s", word, e)
        return _error(500, "Failed to generate quiz question", details=str(e))

    if isinstance(outcome, Fallback):
        return _unparseable(outcome)
    return outcome.payload.to_dict()
