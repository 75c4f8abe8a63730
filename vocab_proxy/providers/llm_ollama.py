from __future__ import annotations

import logging
import time

import httpx

from vocab_proxy.models import GenerationRequest, GenerationResult
from vocab_proxy.providers.base import LLMProvider, TransportError

log = logging.getLogger("vocab_proxy.llm")


class OllamaProvider(LLMProvider):
    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        model: str = "qwen3:8b",
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self._transport = transport

    async def complete(self, request: GenerationRequest) -> GenerationResult:
        log.debug("── PROMPT (%s) ──\n%s", self.model, request.user_prompt)
        t0 = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(
                    f"{self.base_url}/api/chat",
                    json={
                        "model": self.model,
                        "messages": request.messages(),
                        "stream": False,
                        "think": False,
                        "options": {
                            "temperature": request.temperature,
                            "num_predict": request.max_output_tokens,
                        },
                    },
                )
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Ollama returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Ollama request failed: {e}") from e
        except ValueError as e:
            raise TransportError(f"Ollama returned a non-JSON body: {e}") from e

        if not isinstance(data, dict):
            raise TransportError(f"Ollama returned an unexpected body: {data!r}")
        if data.get("error"):
            raise TransportError(f"Ollama error: {data['error']}", details=str(data["error"]))

        message = data.get("message") or {}
        if not isinstance(message, dict):
            raise TransportError(f"Ollama returned an unexpected message: {message!r}")
        text = message.get("content") or ""
        if not isinstance(text, str):
            raise TransportError(f"Ollama returned non-text content: {text!r}")
        elapsed = time.monotonic() - t0
        log.debug("── RESPONSE (%.1fs, %s tokens) ──\n%s", elapsed, data.get("eval_count", "?"), text)
        return GenerationResult(raw_text=text)

    def name(self) -> str:
        return f"ollama/{self.model}"
