"""WordsAPI (RapidAPI) client for word lookups."""
from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from vocab_proxy.providers.base import TransportError

log = logging.getLogger("vocab_proxy.dictionary")

WORDS_API_HOST = "wordsapiv1.p.rapidapi.com"


class DictionaryError(Exception):
    """WordsAPI answered with a non-success status."""

    def __init__(self, status_code: int, details: str):
        super().__init__(f"WordsAPI returned HTTP {status_code}")
        self.status_code = status_code
        self.details = details


class WordsAPIClient:
    def __init__(
        self,
        api_key: str,
        host: str = WORDS_API_HOST,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.host = host
        self.timeout = timeout
        self._transport = transport

    def url_for(self, word: str, section: str | None = "definitions") -> str:
        url = f"https://{self.host}/words/{quote(word, safe='')}"
        if section:
            url += f"/{section}"
        return url

    async def lookup(self, word: str, section: str | None = "definitions"):
        """Fetch the provider's JSON for *word* unchanged.

        Args:
            word: The word to look up
            section: WordsAPI detail path (``"definitions"``, ``"synonyms"``, ...),
                or None for the full entry

        Raises:
            DictionaryError: WordsAPI returned a non-2xx status
            TransportError: The request could not be completed
        """
        url = self.url_for(word, section)
        log.info("Looking up '%s' (%s)", word, section or "entry")
        headers = {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.host,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"WordsAPI request failed: {e}") from e

        log.info("  WordsAPI status: %d", response.status_code)
        if response.is_error:
            log.warning("  WordsAPI error body: %.300s", response.text)
            raise DictionaryError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"WordsAPI returned a non-JSON body: {e}") from e
