from __future__ import annotations

from abc import ABC, abstractmethod

from vocab_proxy.models import GenerationRequest, GenerationResult


class TransportError(Exception):
    """The outbound call itself failed (network error, non-2xx, provider error body)."""

    def __init__(self, message: str, status_code: int | None = None, details: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.details = details or message


class LLMProvider(ABC):
    @abstractmethod
    async def complete(self, request: GenerationRequest) -> GenerationResult:
        ...

    @abstractmethod
    def name(self) -> str:
        ...
