"""Tests for configuration loading and saving."""
from __future__ import annotations

import json
from unittest.mock import patch

from vocab_proxy.config import Settings, load_settings, save_settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.llm_provider == "openai"
        assert s.llm_model == "gpt-4o-mini"
        assert s.default_word == "abase"
        assert s.port == 3001

    def test_to_dict(self):
        d = Settings().to_dict()
        assert d["llm_provider"] == "openai"
        assert len(d) == 9  # all fields present

    def test_to_dict_roundtrip(self):
        s = Settings(llm_provider="ollama", vocab_count=25)
        s2 = Settings(**s.to_dict())
        assert s2.llm_provider == "ollama"
        assert s2.vocab_count == 25

    def test_keys_from_environment(self, monkeypatch):
        monkeypatch.setenv("WORDS_API_KEY", "words-key")
        monkeypatch.setenv("OPENAI_API_KEY", "openai-key")
        s = Settings()
        assert s.words_api_key == "words-key"
        assert s.llm_api_key == "openai-key"

    def test_ollama_needs_no_key(self):
        assert Settings(llm_provider="ollama").llm_api_key == ""


class TestLoadSaveSettings:
    def test_load_from_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"llm_provider": "anthropic", "vocab_count": 5}))

        with patch("vocab_proxy.config.CONFIG_PATH", config_path):
            s = load_settings()
        assert s.llm_provider == "anthropic"
        assert s.vocab_count == 5
        assert s.default_word == "abase"

    def test_load_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        with patch("vocab_proxy.config.CONFIG_PATH", tmp_path / "nonexistent.json"):
            s = load_settings()
        assert s.llm_provider == "openai"

    def test_port_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        with patch("vocab_proxy.config.CONFIG_PATH", tmp_path / "nonexistent.json"):
            s = load_settings()
        assert s.port == 8080

    def test_save_creates_file(self, tmp_path):
        config_path = tmp_path / "config.json"
        with patch("vocab_proxy.config.CONFIG_PATH", config_path):
            save_settings(Settings(llm_provider="ollama"))
        data = json.loads(config_path.read_text())
        assert data["llm_provider"] == "ollama"

    def test_unknown_keys_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"llm_provider": "ollama", "unknown_key": "value"}))
        with patch("vocab_proxy.config.CONFIG_PATH", config_path):
            s = load_settings()
        assert s.llm_provider == "ollama"
        assert not hasattr(s, "unknown_key")
