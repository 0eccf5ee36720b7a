"""LLM-based code translation through a hosted chat-completion gateway."""
import logging
from typing import Any, Optional

import httpx

from config import Config
from errors import (
    EmptyResult,
    MissingConfiguration,
    QuotaExhausted,
    RateLimited,
    UpstreamFailure,
)
from models import TranslationRequest, TranslationResult
from translation.prompts import build_prompts


logger = logging.getLogger(__name__)


def extract_content(data: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` if it is a non-empty string."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str) and content:
        return content
    return None


class CodeTranslator:
    """Translator backed by an OpenAI-compatible chat-completion endpoint."""

    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.endpoint = config.gateway_url
        self.model = config.model
        self.client = client or httpx.AsyncClient(timeout=config.request_timeout)

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate one request with a single upstream call.

        Args:
            request: Validated translation request

        Returns:
            TranslationResult holding the model's text exactly as returned

        Raises:
            MissingConfiguration: no API key is configured
            RateLimited: upstream answered 429
            QuotaExhausted: upstream answered 402
            UpstreamFailure: any other upstream or transport failure
            EmptyResult: upstream succeeded without message content
        """
        if not self.config.has_api_key:
            raise MissingConfiguration()

        logger.info("Translating from %s to %s", request.source_language, request.target_language)

        prompts = build_prompts(request)
        payload = {
            "model": self.model,
            "messages": prompts.messages(),
            "temperature": self.config.temperature,
        }

        try:
            response = await self.client.post(self.endpoint, headers=self._headers(), json=payload)
        except httpx.HTTPError as e:
            logger.error("AI gateway request failed: %s", e)
            raise UpstreamFailure() from e

        if not response.is_success:
            logger.error("AI gateway error: %s %s", response.status_code, response.text)
            if response.status_code == 429:
                raise RateLimited()
            if response.status_code == 402:
                raise QuotaExhausted()
            raise UpstreamFailure()

        try:
            data = response.json()
        except ValueError as e:
            logger.error("AI gateway returned a non-JSON body: %s", response.text)
            raise UpstreamFailure() from e

        translated_code = extract_content(data)
        if translated_code is None:
            logger.error("AI gateway response had no message content")
            raise EmptyResult()

        logger.info("Translation successful")
        return TranslationResult(translated_code=translated_code)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
