from __future__ import annotations

import os

from vocab_proxy.models import GenerationRequest, GenerationResult
from vocab_proxy.providers.base import LLMProvider, TransportError


class AnthropicProvider(LLMProvider):
    def __init__(self, model: str = "claude-sonnet-4-20250514", api_key: str | None = None, **client_kwargs):
        import anthropic
        self._anthropic = anthropic
        client_kwargs.setdefault("max_retries", 0)
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key if api_key is not None else os.environ.get("ANTHROPIC_API_KEY", ""),
            **client_kwargs,
        )
        self.model = model

    async def complete(self, request: GenerationRequest) -> GenerationResult:
        # Anthropic caps temperature at 1.0
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=request.max_output_tokens,
                temperature=min(request.temperature, 1.0),
                system=request.system_instruction,
                messages=[{"role": "user", "content": request.user_prompt}],
            )
        except self._anthropic.APIStatusError as e:
            raise TransportError(
                f"Anthropic returned HTTP {e.status_code}", status_code=e.status_code, details=str(e),
            ) from e
        except self._anthropic.APIError as e:
            raise TransportError(f"Anthropic request failed: {e}", details=str(e)) from e

        text = "".join(block.text for block in message.content if getattr(block, "type", "") == "text")
        return GenerationResult(raw_text=text)

    def name(self) -> str:
        return f"anthropic/{self.model}"
