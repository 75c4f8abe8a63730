from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

load_dotenv()

DEFAULTS = {
    "llm_provider": "openai",
    "llm_model": "gpt-4o-mini",
    "ollama_url": "http://localhost:11434",
    "words_api_host": "wordsapiv1.p.rapidapi.com",
    "default_word": "abase",
    "vocab_count": 10,
    "vocab_cache_ttl": 3600,
    "request_timeout": 30.0,
    "port": 3001,
}


@dataclass
class Settings:
    llm_provider: str = DEFAULTS["llm_provider"]
    llm_model: str = DEFAULTS["llm_model"]
    ollama_url: str = DEFAULTS["ollama_url"]
    words_api_host: str = DEFAULTS["words_api_host"]
    default_word: str = DEFAULTS["default_word"]
    vocab_count: int = DEFAULTS["vocab_count"]
    vocab_cache_ttl: int = DEFAULTS["vocab_cache_ttl"]
    request_timeout: float = DEFAULTS["request_timeout"]
    port: int = DEFAULTS["port"]

    @property
    def words_api_key(self) -> str:
        return os.environ.get("WORDS_API_KEY", "")

    @property
    def llm_api_key(self) -> str:
        if self.llm_provider == "openai":
            return os.environ.get("OPENAI_API_KEY", "")
        if self.llm_provider == "anthropic":
            return os.environ.get("ANTHROPIC_API_KEY", "")
        return ""

    def to_dict(self) -> dict:
        return {
            "llm_provider": self.llm_provider,
            "llm_model": self.llm_model,
            "ollama_url": self.ollama_url,
            "words_api_host": self.words_api_host,
            "default_word": self.default_word,
            "vocab_count": self.vocab_count,
            "vocab_cache_ttl": self.vocab_cache_ttl,
            "request_timeout": self.request_timeout,
            "port": self.port,
        }


def load_settings() -> Settings:
    raw: dict = {}
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    filtered = {k: v for k, v in raw.items() if k in known}
    if "PORT" in os.environ:
        filtered["port"] = int(os.environ["PORT"])
    return Settings(**filtered)


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
