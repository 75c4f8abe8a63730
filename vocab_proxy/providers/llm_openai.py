from __future__ import annotations

import logging
import os

from vocab_proxy.models import GenerationRequest, GenerationResult
from vocab_proxy.providers.base import LLMProvider, TransportError

log = logging.getLogger("vocab_proxy.llm")


class OpenAIProvider(LLMProvider):
    def __init__(self, model: str = "gpt-4o-mini", api_key: str | None = None, **client_kwargs):
        import openai
        self._openai = openai
        # One attempt per call; the SDK would otherwise retry 429/5xx on its own.
        client_kwargs.setdefault("max_retries", 0)
        self.client = openai.AsyncOpenAI(
            api_key=api_key if api_key is not None else os.environ.get("OPENAI_API_KEY", ""),
            **client_kwargs,
        )
        self.model = model

    async def complete(self, request: GenerationRequest) -> GenerationResult:
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=request.messages(),
                temperature=request.temperature,
                max_tokens=request.max_output_tokens,
            )
        except self._openai.APIStatusError as e:
            raise TransportError(
                f"OpenAI returned HTTP {e.status_code}", status_code=e.status_code, details=str(e),
            ) from e
        except self._openai.APIError as e:
            raise TransportError(f"OpenAI request failed: {e}", details=str(e)) from e

        content = ""
        if resp.choices and resp.choices[0].message is not None:
            content = resp.choices[0].message.content or ""
        log.debug("── RESPONSE (%s) ──\n%s", self.model, content)
        return GenerationResult(raw_text=content)

    def name(self) -> str:
        return f"openai/{self.model}"
